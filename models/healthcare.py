"""
models/healthcare.py
--------------------
Domain models for patients and the prescriptions issued to them.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Patient:
    """
    A registered patient.

    Attributes:
        id: Patient number.
        name: Full name.
        age: Age in years.
        gender: Free-text gender label.
    """
    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return f"{self.id}: {self.name}, {self.age}, {self.gender}"


@dataclass(frozen=True)
class Prescription:
    """
    A medication issued to a patient.

    Attributes:
        id: Prescription number.
        patient_id: The ``Patient.id`` this prescription belongs to.
        medication_name: Name of the prescribed medication.
        date_issued: Day the prescription was written.
    """
    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __str__(self) -> str:
        return f"{self.medication_name} (issued: {self.date_issued})"
