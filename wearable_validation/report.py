import json
import os

from wearable_validation.models import Severity, ValidationReport

SEVERITY_ICONS = {
    Severity.PASS: "✅",
    Severity.WARN: "⚠️",
    Severity.FAIL: "❌",
}


def report_to_dict(report: ValidationReport):
    return report.to_dict()


def report_to_json(report: ValidationReport) -> str:
    """Pretty-printed JSON in the exported report shape."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def report_file_name(file_name: str) -> str:
    """``hat_v2.glb`` -> ``hat_v2_validation_report.json``"""
    stem, _ = os.path.splitext(os.path.basename(file_name))
    return f"{stem}_validation_report.json"


def write_report(report: ValidationReport, output_dir) -> str:
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, report_file_name(report.file_name))
    with open(path, "w", encoding="utf-8") as f:
        f.write(report_to_json(report))
    return path


def generate_summary_report(report: ValidationReport) -> str:
    """Plain-text summary with results grouped by category."""
    lines = [
        "Wearable Validation Report",
        "=" * 32,
        "",
        f"File: {report.file_name}",
        f"Target Slot: {report.target_slot.value}",
        f"Triangle Budget: {report.applied_triangle_budget:,}",
        f"Overall Status: {report.overall.value}",
        "",
    ]

    # dicts keep insertion order, so categories appear as the rules ran
    by_category = {}
    for result in report.results:
        by_category.setdefault(result.category.value, []).append(result)

    for category, results in by_category.items():
        lines.append(f"{category}:")
        for r in results:
            lines.append(f"  {SEVERITY_ICONS[r.result]} {r.expected} ({r.actual})")
            if r.tip:
                lines.append(f"     💡 {r.tip}")
        lines.append("")

    if report.notes:
        lines.append("Notes:")
        lines.extend(f"  - {note}" for note in report.notes)
        lines.append("")

    return "\n".join(lines)
