"""
Patient Store
Relational persistence of patient rows behind an explicit interface
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from patient_service.exceptions import EmailAlreadyExistsError
from patient_service.models import Patient

logger = logging.getLogger(__name__)


class PatientStore(ABC):
    """Operations the patient service needs from persistence"""

    @abstractmethod
    def list_all(self) -> List[Patient]: ...

    @abstractmethod
    def find_by_id(self, patient_id: str) -> Optional[Patient]: ...

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Patient]: ...

    @abstractmethod
    def exists_by_id(self, patient_id: str) -> bool: ...

    @abstractmethod
    def exists_by_email(self, email: str) -> bool: ...

    @abstractmethod
    def exists_by_email_excluding_id(self, email: str, patient_id: str) -> bool: ...

    @abstractmethod
    def save(self, patient: Patient) -> Patient: ...

    @abstractmethod
    def delete_by_id(self, patient_id: str) -> None: ...


class SqlAlchemyPatientStore(PatientStore):
    """PatientStore on a Flask-SQLAlchemy session. Every write commits."""

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def list_all(self) -> List[Patient]:
        return (
            Patient.query
            .order_by(Patient.created_at.asc(), Patient.id.asc())
            .all()
        )

    def find_by_id(self, patient_id: str) -> Optional[Patient]:
        return self.session.get(Patient, patient_id)

    def find_by_email(self, email: str) -> Optional[Patient]:
        return Patient.query.filter_by(email=email).first()

    def exists_by_id(self, patient_id: str) -> bool:
        return self.session.query(Patient.query.filter_by(id=patient_id).exists()).scalar()

    def exists_by_email(self, email: str) -> bool:
        return self.session.query(Patient.query.filter_by(email=email).exists()).scalar()

    def exists_by_email_excluding_id(self, email: str, patient_id: str) -> bool:
        query = Patient.query.filter(Patient.email == email, Patient.id != patient_id)
        return self.session.query(query.exists()).scalar()

    def save(self, patient: Patient) -> Patient:
        """Insert or update, then commit"""
        email = patient.email
        try:
            self.session.add(patient)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            # Unique email index caught a concurrent writer
            logger.warning("Integrity error saving patient %s: %s", email, e.orig)
            raise EmailAlreadyExistsError(
                f"A patient with email {email} already exists"
            ) from e
        except Exception:
            self.session.rollback()
            raise
        return patient

    def delete_by_id(self, patient_id: str) -> None:
        try:
            Patient.query.filter_by(id=patient_id).delete()
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
