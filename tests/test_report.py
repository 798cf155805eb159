import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import json
import tempfile
import unittest

from wearable_validation import run_validation
from wearable_validation.models import ModelStats, SkinningStats, Slot, TextureInfo
from wearable_validation.report import (
    generate_summary_report,
    report_file_name,
    report_to_dict,
    report_to_json,
    write_report,
)
from tests.helpers import STATS_JSON, make_selection, make_stats


class TestReportExport(unittest.TestCase):
    def setUp(self):
        self.stats = make_stats(
            triangle_count=2000,
            textures=(TextureInfo("baseColor", 512, 256),),
            skinning=SkinningStats(1000, 2),
        )
        self.report = run_validation(self.stats, make_selection(Slot.HAT), "cool_hat.glb")

    def test_top_level_fields(self):
        data = report_to_dict(self.report)
        self.assertEqual(
            list(data.keys()),
            [
                "overall", "targetSlot", "appliedTriangleBudget", "maxMaterials",
                "maxTextures", "results", "notes", "fileName", "modelStats",
            ],
        )
        self.assertEqual(data["overall"], "FAIL")
        self.assertEqual(data["targetSlot"], "hat")
        self.assertEqual(data["appliedTriangleBudget"], 1500)
        self.assertEqual(data["fileName"], "cool_hat.glb")

    def test_rule_results_omit_missing_tip(self):
        results = {r["id"]: r for r in report_to_dict(self.report)["results"]}
        self.assertEqual(results["triangles"]["result"], "FAIL")
        self.assertEqual(results["triangles"]["category"], "Geometry")
        self.assertIn("tip", results["triangles"])
        self.assertNotIn("tip", results["materials"])
        self.assertEqual(results["texture-square"]["category"], "Textures/Maps")

    def test_model_stats_echo(self):
        stats = report_to_dict(self.report)["modelStats"]
        self.assertEqual(stats["triangleCount"], 2000)
        self.assertEqual(stats["textures"], [{"name": "baseColor", "width": 512, "height": 256}])
        self.assertEqual(stats["skinning"], {"totalVertices": 1000, "badWeightVertices": 2})
        self.assertEqual(stats["alphaModes"], ["OPAQUE", "MASK"])

    def test_skinning_omitted_when_absent(self):
        report = run_validation(make_stats(), make_selection(), "a.glb")
        self.assertNotIn("skinning", report_to_dict(report)["modelStats"])

    def test_json_is_pretty_printed(self):
        text = report_to_json(self.report)
        self.assertTrue(text.startswith('{\n  "overall": "FAIL"'))
        self.assertIn("≤ 1,500 triangles", text)
        self.assertEqual(json.loads(text), report_to_dict(self.report))

    def test_stats_survive_json(self):
        stats = ModelStats.from_dict(STATS_JSON)
        report = run_validation(stats, make_selection(), "a.glb")
        echoed = json.loads(report_to_json(report))["modelStats"]
        self.assertEqual(ModelStats.from_dict(echoed), stats)

    def test_report_file_name(self):
        self.assertEqual(report_file_name("cool_hat.glb"), "cool_hat_validation_report.json")
        self.assertEqual(report_file_name("dir/my.model.gltf"), "my.model_validation_report.json")
        self.assertEqual(report_file_name("noext"), "noext_validation_report.json")

    def test_write_report(self):
        with tempfile.TemporaryDirectory() as tmp:
            out_dir = os.path.join(tmp, "reports")
            path = write_report(self.report, out_dir)
            self.assertEqual(path, os.path.join(out_dir, "cool_hat_validation_report.json"))
            with open(path, "r", encoding="utf-8") as f:
                self.assertEqual(json.load(f)["overall"], "FAIL")


class TestSummaryReport(unittest.TestCase):
    def test_summary_layout(self):
        stats = make_stats(triangle_count=2000, textures=(TextureInfo("baseColor", 512, 256),))
        report = run_validation(stats, make_selection(Slot.HAT), "cool_hat.glb")
        summary = generate_summary_report(report)
        lines = summary.splitlines()

        self.assertEqual(lines[0], "Wearable Validation Report")
        self.assertIn("File: cool_hat.glb", lines)
        self.assertIn("Target Slot: hat", lines)
        self.assertIn("Triangle Budget: 1,500", lines)
        self.assertIn("Overall Status: FAIL", lines)
        self.assertIn("  ❌ ≤ 1,500 triangles (2,000 triangles)", lines)
        self.assertIn("  ⚠️ All textures are square (recommended) (1 texture(s) are not square)", lines)
        self.assertTrue(any(line.startswith("     💡 Reduce triangles by 25%") for line in lines))

    def test_categories_in_rule_order(self):
        report = run_validation(make_stats(), make_selection(), "a.glb")
        summary = generate_summary_report(report)
        positions = [
            summary.index(c + ":")
            for c in ("Geometry", "Materials", "Textures/Maps", "Dimensions", "File Integrity")
        ]
        self.assertEqual(positions, sorted(positions))
        self.assertEqual(summary.count("Textures/Maps:"), 1)

    def test_notes_section(self):
        report = run_validation(make_stats(), make_selection(Slot.HANDS, hand_hides_base=True), "g.glb")
        summary = generate_summary_report(report)
        self.assertIn("Notes:", summary)
        self.assertIn("1.5k", summary)


if __name__ == "__main__":
    unittest.main(verbosity=2)
