"""
Errors surfaced to the API boundary as JSON error responses.
"""


class PatientServiceError(Exception):
    """Base error with the HTTP status the API answers with"""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {
            'success': False,
            'error': self.message
        }


class PatientNotFoundError(PatientServiceError):
    status_code = 404


class EmailAlreadyExistsError(PatientServiceError):
    status_code = 409


class ValidationError(PatientServiceError):
    status_code = 400

    def __init__(self, errors, message='Validation failed'):
        super().__init__(message)
        self.errors = errors

    def to_dict(self):
        data = super().to_dict()
        data['errors'] = self.errors
        return data


class BillingServiceError(PatientServiceError):
    """Billing account creation failed (transport error or non-2xx reply)"""
    status_code = 502
