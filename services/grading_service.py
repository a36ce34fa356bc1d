"""
services/grading_service.py
----------------------------
Reads student results from comma-separated text, grades them and writes
the report.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from models.errors import MalformedRecordError
from models.student import Student
from utils.logger import get_logger

logger = get_logger(__name__)

SAMPLE_LINES = (
    "101, John Doe, 85",
    "102, Jane Smith, 72",
    "103, Alice Johnson, 91",
    "104, Bob Brown, 58",
    "105, Charlie Davis, 42",
    "106, Invalid Student, abc",
    "107, Missing Field",
    "108, Emily Wilson, 95",
)


@dataclass
class ImportReport:
    """
    Outcome of a bulk import.

    Attributes:
        students: Accepted records, in input order.
        skipped: One diagnostic per rejected line.
    """
    students: list[Student] = field(default_factory=list)
    skipped: list[MalformedRecordError] = field(default_factory=list)


def parse_line(line: str, line_number: int) -> Student:
    """
    Parse one ``id, full name, score`` line.

    Raises:
        MalformedRecordError: Wrong field count, blank name, or a
            non-integer id/score.
    """
    parts = line.split(",")
    if len(parts) != 3:
        raise MalformedRecordError(f"Expected 3 fields but found {len(parts)}", line_number)

    raw_id, raw_name, raw_score = (p.strip() for p in parts)
    try:
        student_id = int(raw_id)
    except ValueError:
        raise MalformedRecordError(f"Invalid ID format '{raw_id}'", line_number) from None

    if not raw_name:
        raise MalformedRecordError("Missing student name", line_number)

    try:
        score = int(raw_score)
    except ValueError:
        raise MalformedRecordError(f"Invalid score format '{raw_score}'", line_number) from None

    return Student(student_id, raw_name, score)


def decode_line(raw: bytes, line_number: int) -> str:
    """
    Decode one raw input line as UTF-8 (a leading BOM is dropped).

    Raises:
        MalformedRecordError: The bytes are not valid UTF-8.
    """
    try:
        return raw.decode("utf-8").lstrip("\ufeff")
    except UnicodeDecodeError as e:
        raise MalformedRecordError(
            f"Line is not valid UTF-8 (byte 0x{raw[e.start]:02x} at position {e.start})",
            line_number,
        ) from None


def format_report_line(student: Student) -> str:
    return f"{student.full_name} (ID: {student.id}): Score = {student.score}, Grade = {student.grade}"


class StudentResultProcessor:
    """Imports student lines and renders the grade report."""

    def read_students(self, lines: Iterable[str | bytes]) -> ImportReport:
        """
        Parse every non-blank line; malformed lines are logged and skipped.

        Lines may be ``str`` or raw ``bytes``; a bytes line that is not valid
        UTF-8 is malformed. Line numbers are 1-based and count blank lines.
        """
        report = ImportReport()
        for line_number, line in enumerate(lines, start=1):
            try:
                if isinstance(line, bytes):
                    line = decode_line(line, line_number)
                if not line.strip():
                    continue
                report.students.append(parse_line(line.rstrip("\r\n"), line_number))
            except MalformedRecordError as e:
                logger.warning(f"Skipping line {line_number}: {e.reason}")
                report.skipped.append(e)
        logger.info(
            f"Imported {len(report.students)} students, skipped {len(report.skipped)} lines"
        )
        return report

    def read_students_from_file(self, input_path: str | Path) -> ImportReport:
        """
        Import a file, decoding it line by line.

        Raises:
            FileNotFoundError / OSError: The input cannot be read; the whole
                import is aborted.
        """
        with open(input_path, "rb") as f:
            return self.read_students(f)

    def render_report(self, students: Iterable[Student]) -> list[str]:
        return [format_report_line(s) for s in students]

    def write_report_to_file(self, students: Iterable[Student], output_path: str | Path) -> int:
        """
        Write one report line per student.

        Returns:
            Number of lines written.
        """
        lines = self.render_report(students)
        with open(output_path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        logger.info(f"Wrote {len(lines)} report lines to {output_path}")
        return len(lines)

    @staticmethod
    def write_sample_input(input_path: str | Path) -> None:
        """Create the demonstration input file."""
        Path(input_path).write_text("\n".join(SAMPLE_LINES), encoding="utf-8")
        logger.info(f"Created sample input at {input_path}")
