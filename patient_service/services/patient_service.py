"""
Patient Service
Business rules for patient records: email uniqueness and billing registration
"""
import logging
from typing import Any, Dict, List

from patient_service.exceptions import EmailAlreadyExistsError, PatientNotFoundError
from patient_service.models import Patient
from patient_service.stores import PatientStore

logger = logging.getLogger(__name__)


class PatientService:
    """Coordinates the patient store and the billing client"""

    def __init__(self, store: PatientStore, billing_client):
        self.store = store
        self.billing_client = billing_client

    def get_patients(self) -> List[Dict[str, Any]]:
        return [patient.to_dict() for patient in self.store.list_all()]

    def get_patient(self, patient_id: str) -> Dict[str, Any]:
        return self._get_or_raise(patient_id).to_dict()

    def create_patient(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a patient and register their billing account.

        Args:
            data: validated payload (name, email, address, date_of_birth,
                registered_date)

        Returns:
            dict: created patient

        Raises:
            EmailAlreadyExistsError: email already used by a patient
            BillingServiceError: billing call failed; the patient row is
                already committed at that point and is not rolled back
        """
        if self.store.exists_by_email(data['email']):
            logger.warning(f"Rejected patient create, email in use: {data['email']}")
            raise EmailAlreadyExistsError(f"A patient with email {data['email']} already exists")

        patient = self.store.save(Patient(
            name=data['name'],
            email=data['email'],
            address=data['address'],
            date_of_birth=data['date_of_birth'],
            registered_date=data['registered_date'],
        ))
        logger.info(f"Created patient {patient.id}")

        # TODO: retry or compensate when billing fails after the patient is committed
        self.billing_client.create_patient_account(patient.id, patient.name, patient.email)

        return patient.to_dict()

    def update_patient(self, patient_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Overwrite name, email, date of birth and address. registered_date stays as created."""
        patient = self._get_or_raise(patient_id)

        if self.store.exists_by_email_excluding_id(data['email'], patient_id):
            logger.warning(f"Rejected update of patient {patient_id}, email in use: {data['email']}")
            raise EmailAlreadyExistsError(f"A patient with email {data['email']} already exists")

        patient.name = data['name']
        patient.email = data['email']
        patient.date_of_birth = data['date_of_birth']
        patient.address = data['address']

        patient = self.store.save(patient)
        logger.info(f"Updated patient {patient_id}")
        return patient.to_dict()

    def delete_patient(self, patient_id: str) -> None:
        if not self.store.exists_by_id(patient_id):
            raise PatientNotFoundError(f"Patient with ID {patient_id} not found")
        self.store.delete_by_id(patient_id)
        logger.info(f"Deleted patient {patient_id}")

    def _get_or_raise(self, patient_id: str) -> Patient:
        patient = self.store.find_by_id(patient_id)
        if patient is None:
            raise PatientNotFoundError(f"Patient with ID {patient_id} not found")
        return patient
