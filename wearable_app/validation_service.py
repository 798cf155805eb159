import json
import logging
import os

from wearable_app.core.settings import load_settings
from wearable_validation import ValidationRunner, find_duplicate_hidden_slots
from wearable_validation.models import ModelStats, StatsContractError
from wearable_validation.report import write_report

logger = logging.getLogger(__name__)


class ValidationService:
    def __init__(self, settings=None, runner=None):
        self.settings = settings or load_settings()
        self.runner = runner or ValidationRunner()

    def load_stats(self, stats_path):
        """Loads a ModelStats JSON document written by the extractor."""
        with open(stats_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return ModelStats.from_dict(data)

    def validate_stats_file(self, stats_path, selection, file_name=None):
        """Loads extracted statistics then runs the validation rules.

        Returns ``(report, None)`` on success or ``(None, error_message)`` when
        the statistics cannot be read.
        """
        if not os.path.exists(stats_path):
            return None, f"Statistics file not found: {stats_path}"

        try:
            stats = self.load_stats(stats_path)
        except json.JSONDecodeError as e:
            logger.error("Could not parse %s: %s", stats_path, e)
            return None, f"Failed to parse statistics JSON: {e}"
        except StatsContractError as e:
            logger.error("Statistics in %s are incomplete: %s", stats_path, e)
            return None, str(e)
        except (OSError, ValueError) as e:
            logger.error("Could not read %s: %s", stats_path, e)
            return None, f"Failed to read statistics file: {e}"

        if file_name is None:
            file_name = os.path.basename(stats_path)

        return self.validate(stats, selection, file_name), None

    def validate(self, stats, selection, file_name):
        duplicates = find_duplicate_hidden_slots(selection)
        if duplicates:
            # Budgets are summed per entry, so a repeated slot counts more than once.
            logger.warning(
                "Hidden slots listed more than once: %s",
                ", ".join(getattr(s, "value", str(s)) for s in duplicates),
            )

        report = self.runner.validate(stats, selection, file_name)
        logger.info(
            "%s validated as %s: %s (budget %d triangles)",
            file_name, report.target_slot.value, report.overall.value,
            report.applied_triangle_budget,
        )
        return report

    def export_report(self, report, output_dir=None):
        """Writes the JSON report and returns its path."""
        path = write_report(report, output_dir or self.settings.report_dir)
        logger.info("Report written to %s", path)
        return path
