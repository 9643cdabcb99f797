"""Shared fixtures: an app on in-memory SQLite with a recording billing client."""

import pytest

from patient_service import create_app
from patient_service.exceptions import BillingServiceError
from patient_service.extensions import db


class RecordingBillingClient:
    """Billing client double that records account requests."""

    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def create_patient_account(self, patient_id, name, email):
        self.calls.append({"patient_id": patient_id, "name": name, "email": email})
        if self.fail:
            raise BillingServiceError(f"Failed to create billing account for patient {patient_id}")
        return {"accountId": f"acct-{patient_id}", "status": "ACTIVE"}


@pytest.fixture
def billing_client():
    return RecordingBillingClient()


@pytest.fixture
def app(billing_client):
    app = create_app("testing", billing_client=billing_client)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def service(app):
    return app.extensions["patient_service"]


def patient_payload(**overrides):
    payload = {
        "name": "Ada Lovelace",
        "email": "a@x.com",
        "address": "12 St James's Square, London",
        "dateOfBirth": "1815-12-10",
        "registeredDate": "2024-01-15",
    }
    payload.update(overrides)
    return payload
