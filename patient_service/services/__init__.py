from flask import current_app

from .patient_service import PatientService


def get_patient_service() -> PatientService:
    """PatientService wired for the current app by create_app"""
    return current_app.extensions['patient_service']


__all__ = [
    "PatientService",
    "get_patient_service",
]
