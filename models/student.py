"""
models/student.py
-----------------
Domain model for a graded student result.
"""

from dataclasses import dataclass

# (lower bound inclusive, grade); first match wins, scores above 100 fall to F.
_GRADE_BANDS = ((80, "A"), (70, "B"), (60, "C"), (50, "D"))


def grade_for(score: int) -> str:
    """Map a numeric score to its letter grade."""
    if score > 100:
        return "F"
    for lower, grade in _GRADE_BANDS:
        if score >= lower:
            return grade
    return "F"


@dataclass(frozen=True)
class Student:
    """
    One student's result as read from the grading input.

    Attributes:
        id: Student number.
        full_name: Name as written in the input.
        score: Integer exam score.
    """
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        return grade_for(self.score)

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"
