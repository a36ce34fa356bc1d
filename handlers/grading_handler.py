"""
handlers/grading_handler.py
----------------------------
Console flow for the school grading system.
"""

from pathlib import Path

from config import EXPORT_DIR, GRADES_INPUT_PATH, GRADES_REPORT_PATH, REPORT_PREVIEW_LINES
from services.export_service import ExportService
from services.grading_service import ImportReport, StudentResultProcessor
from utils.console import Console
from utils.logger import get_logger

logger = get_logger(__name__)


def run_grading(console: Console) -> ImportReport | None:
    """
    Import students, write the report and show a preview.

    Returns:
        The import report, or None if the input could not be read.
    """
    console.say("=== School Grading System ===")
    processor = StudentResultProcessor()

    input_path = console.ask("Enter path to input file (or press Enter for default): ")
    if not input_path:
        input_path = GRADES_INPUT_PATH
        if not Path(input_path).exists():
            processor.write_sample_input(input_path)
    output_path = console.ask(
        "Enter path for output report (or press Enter for default): ",
        default=GRADES_REPORT_PATH,
    )

    console.say(f"\nReading student data from {input_path}...")
    try:
        report = processor.read_students_from_file(input_path)
    except FileNotFoundError as e:
        logger.error(f"Input file not found: {e}")
        console.say(f"Error: Input file not found - {e}")
        return None
    except OSError as e:
        logger.error(f"Cannot read {input_path}: {e}")
        console.say(f"Error: Cannot read input file - {e}")
        return None

    for skipped in report.skipped:
        console.say(f"Skipping line {skipped.line_number}: {skipped.reason}")
    console.say(f"Successfully processed {len(report.students)} students.")

    console.say(f"\nGenerating report to {output_path}...")
    processor.write_report_to_file(report.students, output_path)
    console.say("Report generated successfully!")

    console.say("\nSample of generated report:")
    lines = processor.render_report(report.students)
    for line in lines[:REPORT_PREVIEW_LINES]:
        console.say(f"  {line}")
    if len(lines) > REPORT_PREVIEW_LINES:
        console.say(f"  ... and {len(lines) - REPORT_PREVIEW_LINES} more")

    if console.ask("\nExport results to CSV? (y/N): ").lower() == "y":
        path = Path(EXPORT_DIR) / f"{Path(output_path).stem}.csv"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(ExportService().export_grades_csv(report.students).getvalue())
        console.say(f"Exported results to {path}")
    return report
