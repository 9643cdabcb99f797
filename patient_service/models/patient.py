"""
Patient Model
A registered patient. id and registered_date are written once at creation.
"""
import uuid

from patient_service.extensions import db
from .base import TimestampMixin


def _new_patient_id():
    return str(uuid.uuid4())


class Patient(db.Model, TimestampMixin):
    __tablename__ = 'patients'

    id = db.Column(db.String(36), primary_key=True, default=_new_patient_id)

    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    address = db.Column(db.String(255), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=False)

    # Set at creation, never updated
    registered_date = db.Column(db.Date, nullable=False)

    def __repr__(self):
        return f"<Patient {self.name} ({self.id})>"

    def to_dict(self):
        """Convert to dictionary for API responses"""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'address': self.address,
            'dateOfBirth': self.date_of_birth.isoformat() if self.date_of_birth else None,
            'registeredDate': self.registered_date.isoformat() if self.registered_date else None,
        }
