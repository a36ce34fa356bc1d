"""
handlers/healthcare_handler.py
-------------------------------
Console flow for the healthcare system.
"""

from services.healthcare_service import HealthcareService
from utils.console import Console


def print_prescriptions(console: Console, service: HealthcareService, patient_id: int) -> None:
    result = service.get_prescriptions_for_patient(patient_id)
    if not result.success:
        console.say(result.message)
        return

    patient = service.get_patient(patient_id)
    console.say(f"\nPrescriptions for {patient.name}:")
    if not result.value:
        console.say("No prescriptions found for this patient.")
    for prescription in result.value:
        console.say(f"- {prescription}")


def run_healthcare(console: Console) -> HealthcareService:
    """Seed the records, list patients and look up prescriptions until 0 is entered."""
    console.say("=== Healthcare Management System ===")
    service = HealthcareService()
    service.seed_data()
    service.build_prescription_map()

    console.say("\nRegistered Patients:")
    for patient in service.list_patients():
        console.say(str(patient))

    patient_id = console.ask_int("\nEnter Patient ID to view prescriptions (or 0 to exit): ")
    while patient_id != 0:
        print_prescriptions(console, service, patient_id)
        patient_id = console.ask_int("\nEnter another Patient ID (or 0 to exit): ")
    return service
