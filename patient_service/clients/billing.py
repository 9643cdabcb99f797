"""
Billing Service client
Registers a billing account for a newly created patient
"""
import logging

import requests

from patient_service.exceptions import BillingServiceError

logger = logging.getLogger(__name__)


class BillingServiceClient:
    """HTTP client for the billing service's account endpoint"""

    ACCOUNTS_PATH = '/billing/accounts'

    def __init__(self, base_url, timeout=5.0, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def create_patient_account(self, patient_id, name, email):
        """
        Create a billing account for a patient

        Args:
            patient_id: Patient ID
            name: Patient name
            email: Patient email

        Returns:
            dict: Billing response (accountId, status)

        Raises:
            BillingServiceError: if the call fails or billing answers non-2xx
        """
        url = f"{self.base_url}{self.ACCOUNTS_PATH}"
        payload = {
            'patientId': str(patient_id),
            'name': name,
            'email': email,
        }

        logger.info(f"Sending billing account request for patient {patient_id} to {url}")
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Billing account request failed for patient {patient_id}: {e}", exc_info=True)
            raise BillingServiceError(f"Failed to create billing account for patient {patient_id}") from e

        # Account exists once billing answers 2xx; the body is informational
        data = {}
        if response.content:
            try:
                decoded = response.json()
            except ValueError:
                logger.warning(f"Billing reply for patient {patient_id} is not JSON, ignoring body")
                decoded = {}
            if isinstance(decoded, dict):
                data = decoded
        logger.info(f"Billing account created for patient {patient_id}: status={data.get('status')}")
        return data


class DisabledBillingClient:
    """Stand-in used when BILLING_ENABLED is false"""

    def create_patient_account(self, patient_id, name, email):
        logger.warning(f"Billing disabled, skipping account creation for patient {patient_id}")
        return {'patientId': str(patient_id), 'status': 'SKIPPED'}
