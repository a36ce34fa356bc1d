"""
services/healthcare_service.py
-------------------------------
Business logic for the healthcare system: patients, prescriptions and the
patient -> prescriptions index.
"""

from datetime import date, timedelta
from typing import Optional

from models.errors import ErrorKind
from models.healthcare import Patient, Prescription
from models.result import Result
from repositories.grouping_index import GroupingIndex
from repositories.linear_repo import LinearRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class HealthcareService:
    """
    Owns the patient and prescription repositories.

    The prescription map is a snapshot: after ``add_prescription`` (or any
    other change to the prescriptions) call ``build_prescription_map`` again
    before relying on ``get_prescriptions_for_patient``. Removing a patient
    does not remove their prescriptions.
    """

    def __init__(self):
        self.patients: LinearRepository[Patient] = LinearRepository()
        self.prescriptions: LinearRepository[Prescription] = LinearRepository()
        self.prescription_map: GroupingIndex[int, Prescription] = GroupingIndex()

    def seed_data(self, today: Optional[date] = None) -> None:
        """Load three sample patients and five prescriptions."""
        today = today or date.today()
        self.add_patient(Patient(1, "John Doe", 35, "Male"))
        self.add_patient(Patient(2, "Jane Smith", 28, "Female"))
        self.add_patient(Patient(3, "Alice Johnson", 42, "Female"))

        self.add_prescription(Prescription(1, 1, "Ibuprofen", today - timedelta(days=10)))
        self.add_prescription(Prescription(2, 1, "Amoxicillin", today - timedelta(days=5)))
        self.add_prescription(Prescription(3, 2, "Paracetamol", today - timedelta(days=3)))
        self.add_prescription(Prescription(4, 2, "Vitamin D", today - timedelta(days=1)))
        self.add_prescription(Prescription(5, 3, "Antihistamine", today))
        logger.info(
            f"Seeded {len(self.patients)} patients and {len(self.prescriptions)} prescriptions"
        )

    def build_prescription_map(self) -> None:
        """Regroup all current prescriptions by patient id."""
        self.prescription_map.build(self.prescriptions, lambda p: p.patient_id)
        logger.info(f"Prescription map built for {len(self.prescription_map)} patients")

    def add_patient(self, patient: Patient) -> None:
        self.patients.add(patient)

    def add_prescription(self, prescription: Prescription) -> None:
        """Store a prescription. The prescription map is not rebuilt."""
        self.prescriptions.add(prescription)

    def get_patient(self, patient_id: int) -> Optional[Patient]:
        return self.patients.find_first(lambda p: p.id == patient_id)

    def list_patients(self) -> list[Patient]:
        return self.patients.list_all()

    def remove_patient(self, patient_id: int) -> bool:
        """Remove the first patient with this id. Prescriptions are kept."""
        removed = self.patients.remove_first(lambda p: p.id == patient_id)
        if removed:
            logger.info(f"Removed patient #{patient_id}")
        return removed

    def get_prescriptions_for_patient(self, patient_id: int) -> Result[list[Prescription]]:
        """
        Prescriptions for a patient, as of the last map build.

        Returns:
            Result carrying a (possibly empty) list, or NOT_FOUND if no such
            patient is registered.
        """
        if self.get_patient(patient_id) is None:
            logger.warning(f"Patient with ID {patient_id} not found")
            return Result.fail(ErrorKind.NOT_FOUND, f"Patient with ID {patient_id} not found.")
        return Result.ok(self.prescription_map.lookup(patient_id))
