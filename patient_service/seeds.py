"""
Demo patient data, inserted only when the patients table is empty.
"""
import logging
from datetime import date

from patient_service.extensions import db
from patient_service.models import Patient

logger = logging.getLogger(__name__)

DEMO_PATIENTS = [
    {"name": "John Doe", "email": "john.doe@example.com", "address": "123 Main St, Springfield",
     "date_of_birth": date(1985, 6, 15), "registered_date": date(2024, 1, 10)},
    {"name": "Jane Smith", "email": "jane.smith@example.com", "address": "456 Elm St, Shelbyville",
     "date_of_birth": date(1990, 9, 23), "registered_date": date(2023, 12, 1)},
    {"name": "Alice Johnson", "email": "alice.johnson@example.com", "address": "789 Oak St, Capital City",
     "date_of_birth": date(1978, 3, 12), "registered_date": date(2022, 6, 20)},
    {"name": "Bob Brown", "email": "bob.brown@example.com", "address": "321 Pine St, Springfield",
     "date_of_birth": date(1982, 11, 30), "registered_date": date(2023, 5, 14)},
    {"name": "Emily Davis", "email": "emily.davis@example.com", "address": "654 Maple St, Shelbyville",
     "date_of_birth": date(1995, 2, 5), "registered_date": date(2024, 3, 1)},
]


def seed_patients():
    """Create demo patients if none exist. Returns the number inserted."""
    try:
        if Patient.query.count() > 0:
            return 0
        for row in DEMO_PATIENTS:
            db.session.add(Patient(**row))
        db.session.commit()
        logger.info("Seeded %d demo patients", len(DEMO_PATIENTS))
        return len(DEMO_PATIENTS)
    except Exception as e:
        db.session.rollback()
        logger.warning("Patient seeding skipped: %s", e)
        return 0
