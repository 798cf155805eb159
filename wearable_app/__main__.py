"""
Wearable validation runner.

Runs the platform checks against a ModelStats JSON file produced by the
extractor and prints structured results.

Usage:
    python -m wearable_app <stats_json> <target_slot> [--hide SLOT ...]

Exit codes:
    0 = Passed (warnings allowed)
    1 = One or more checks failed
    2 = Bad arguments or unreadable statistics
"""
import argparse
import sys

from wearable_app.core.log_setup import configure_logging
from wearable_app.core.selection_state import SelectionState
from wearable_app.core.settings import load_settings
from wearable_app.validation_service import ValidationService
from wearable_validation import get_available_target_slots
from wearable_validation.models import Severity, Slot
from wearable_validation.report import report_to_json

STATUS_LABELS = {
    Severity.PASS: "✅ PASS",
    Severity.WARN: "⚠️ WARN",
    Severity.FAIL: "❌ FAIL",
}


def build_parser():
    parser = argparse.ArgumentParser(prog="wearable-validate")
    parser.add_argument("stats_json", help="ModelStats JSON produced by the extractor")
    parser.add_argument(
        "target_slot",
        choices=[s.value for s in get_available_target_slots()],
        help="Slot the wearable occupies",
    )
    parser.add_argument(
        "--hide", action="append", default=[], metavar="SLOT",
        choices=[s.value for s in Slot],
        help="Slot hidden by the wearable (repeatable)",
    )
    parser.add_argument("--hand-hides-base", action="store_true",
                        help="Hand accessory hides the base hand")
    parser.add_argument("--file-name", help="Name recorded in the report")
    parser.add_argument("--output-dir", help="Write the JSON report to this directory")
    parser.add_argument("--json", action="store_true", help="Print the JSON report instead")
    return parser


def print_report(report):
    print("\n" + "=" * 60)
    print(f"  VALIDATION RESULTS — {report.file_name} ({report.target_slot.value})")
    print(f"  Triangle budget: {report.applied_triangle_budget:,}")
    print("=" * 60 + "\n")

    for r in report.results:
        print(f"  {STATUS_LABELS[r.result]} [{r.id}]: {r.actual} (expected {r.expected})")
        if r.tip:
            print(f"     Fix: {r.tip}")

    for note in report.notes:
        print(f"\n  Note: {note}")

    failed = sum(1 for r in report.results if r.result == Severity.FAIL)
    total = len(report.results)
    print(f"\n{'=' * 60}")
    if failed:
        print(f"  RESULT: FAILED ({failed} of {total} checks failed)")
    elif report.overall == Severity.WARN:
        print(f"  RESULT: PASSED WITH WARNINGS ({total} checks run)")
    else:
        print(f"  RESULT: PASSED ({total} of {total} checks passed)")
    print("=" * 60 + "\n")


def main(argv=None):
    args = build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    state = SelectionState()
    state.set_target_slot(args.target_slot)
    if args.target_slot != Slot.SKIN.value:
        state.set_hidden_slots([s for s in args.hide if s != args.target_slot])
    state.set_hand_hides_base(args.hand_hides_base)

    service = ValidationService(settings)
    report, error = service.validate_stats_file(args.stats_json, state.to_selection(), args.file_name)
    if error:
        print(f"❌ FATAL: {error}", file=sys.stderr)
        return 2

    if args.json:
        print(report_to_json(report))
    else:
        print_report(report)

    if args.output_dir:
        service.export_report(report, args.output_dir)

    return 1 if report.overall == Severity.FAIL else 0


if __name__ == "__main__":
    sys.exit(main())
