from .validation import validate_patient_payload, parse_date

__all__ = [
    "validate_patient_payload",
    "parse_date",
]
