"""Tests for patient payload validation."""

from datetime import date

import pytest

from patient_service.exceptions import ValidationError
from patient_service.utils.validation import parse_date, validate_patient_payload
from tests.conftest import patient_payload


class TestParseDate:
    """Tests for ISO date parsing."""

    def test_parses_iso_date(self):
        assert parse_date("1990-09-23") == date(1990, 9, 23)

    def test_rejects_garbage(self):
        assert parse_date("23/09/1990") is None
        assert parse_date("") is None
        assert parse_date(None) is None
        assert parse_date(19900923) is None


class TestCreateRules:
    """Create requires every field including registeredDate."""

    def test_valid_payload_is_normalized(self):
        cleaned = validate_patient_payload(patient_payload(name="  Ada  "), creating=True)

        assert cleaned == {
            "name": "Ada",
            "email": "a@x.com",
            "address": "12 St James's Square, London",
            "date_of_birth": date(1815, 12, 10),
            "registered_date": date(2024, 1, 15),
        }

    def test_registered_date_required(self):
        payload = patient_payload()
        del payload["registeredDate"]

        with pytest.raises(ValidationError) as exc_info:
            validate_patient_payload(payload, creating=True)

        assert exc_info.value.errors == {"registeredDate": "registeredDate is required"}

    def test_all_missing_fields_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_payload({}, creating=True)

        assert set(exc_info.value.errors) == {"name", "email", "address", "dateOfBirth", "registeredDate"}

    def test_invalid_email(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_payload(patient_payload(email="not-an-email"), creating=True)

        assert exc_info.value.errors == {"email": "email should be valid"}

    def test_name_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_payload(patient_payload(name="x" * 101), creating=True)

        assert "name" in exc_info.value.errors

    def test_bad_dates(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_payload(
                patient_payload(dateOfBirth="10/12/1815", registeredDate="yesterday"), creating=True
            )

        assert set(exc_info.value.errors) == {"dateOfBirth", "registeredDate"}


class TestUpdateRules:
    """Update uses the default rule set only."""

    def test_registered_date_not_required(self):
        payload = patient_payload()
        del payload["registeredDate"]

        cleaned = validate_patient_payload(payload)

        assert "registered_date" not in cleaned
        assert cleaned["email"] == "a@x.com"

    def test_registered_date_ignored(self):
        cleaned = validate_patient_payload(patient_payload(registeredDate="2000-01-01"))

        assert "registered_date" not in cleaned

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_payload(patient_payload(name="   "))

        assert exc_info.value.errors == {"name": "name is required"}

    def test_non_object_body(self):
        with pytest.raises(ValidationError):
            validate_patient_payload(["not", "a", "dict"])


class TestColumnLengths:
    """Values longer than their patients column are rejected up front."""

    def test_email_too_long(self):
        email = "a" * 300 + "@x.com"

        with pytest.raises(ValidationError) as exc_info:
            validate_patient_payload(patient_payload(email=email), creating=True)

        assert exc_info.value.errors == {"email": "email cannot exceed 120 characters"}

    def test_address_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_payload(patient_payload(address="x" * 256))

        assert exc_info.value.errors == {"address": "address cannot exceed 255 characters"}

    def test_values_at_column_limit_accepted(self):
        email = "a" * 114 + "@x.com"

        cleaned = validate_patient_payload(patient_payload(email=email, address="x" * 255, name="n" * 100))

        assert len(cleaned["email"]) == 120
        assert len(cleaned["address"]) == 255
