"""
Request payload validation for patient create / update
"""
import re
from datetime import date, datetime

from patient_service.exceptions import ValidationError
from patient_service.models import Patient

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
# Limits follow the patients table columns
NAME_MAX_LENGTH = Patient.__table__.c.name.type.length
EMAIL_MAX_LENGTH = Patient.__table__.c.email.type.length
ADDRESS_MAX_LENGTH = Patient.__table__.c.address.type.length

# Fields checked for every write; create also requires registeredDate
DEFAULT_REQUIRED_FIELDS = ['name', 'email', 'address', 'dateOfBirth']
CREATE_REQUIRED_FIELDS = DEFAULT_REQUIRED_FIELDS + ['registeredDate']


def parse_date(date_string):
    """Parse an ISO YYYY-MM-DD string to a date, None if it is not one"""
    if isinstance(date_string, date) and not isinstance(date_string, datetime):
        return date_string
    if not isinstance(date_string, str) or not date_string.strip():
        return None
    try:
        return datetime.strptime(date_string.strip(), '%Y-%m-%d').date()
    except ValueError:
        return None


def validate_patient_payload(data, creating=False):
    """
    Validate a patient request body.

    Args:
        data: decoded JSON body
        creating: apply the create rule set (registeredDate required)

    Returns:
        dict with name, email, address, date_of_birth and, when creating,
        registered_date

    Raises:
        ValidationError: with a field -> message map
    """
    if not isinstance(data, dict):
        raise ValidationError({'body': 'Request body must be a JSON object'})

    required = CREATE_REQUIRED_FIELDS if creating else DEFAULT_REQUIRED_FIELDS
    errors = {}

    for field in required:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors[field] = f'{field} is required'

    name = data.get('name')
    if 'name' not in errors:
        if not isinstance(name, str):
            errors['name'] = 'name must be a string'
        elif len(name.strip()) > NAME_MAX_LENGTH:
            errors['name'] = f'name cannot exceed {NAME_MAX_LENGTH} characters'

    email = data.get('email')
    if 'email' not in errors:
        if not isinstance(email, str) or not EMAIL_PATTERN.match(email.strip()):
            errors['email'] = 'email should be valid'
        elif len(email.strip()) > EMAIL_MAX_LENGTH:
            errors['email'] = f'email cannot exceed {EMAIL_MAX_LENGTH} characters'

    address = data.get('address')
    if 'address' not in errors:
        if not isinstance(address, str):
            errors['address'] = 'address must be a string'
        elif len(address.strip()) > ADDRESS_MAX_LENGTH:
            errors['address'] = f'address cannot exceed {ADDRESS_MAX_LENGTH} characters'

    date_of_birth = None
    if 'dateOfBirth' not in errors:
        date_of_birth = parse_date(data.get('dateOfBirth'))
        if date_of_birth is None:
            errors['dateOfBirth'] = 'dateOfBirth must be a date in YYYY-MM-DD format'

    registered_date = None
    if creating and 'registeredDate' not in errors:
        registered_date = parse_date(data.get('registeredDate'))
        if registered_date is None:
            errors['registeredDate'] = 'registeredDate must be a date in YYYY-MM-DD format'

    if errors:
        raise ValidationError(errors)

    cleaned = {
        'name': name.strip(),
        'email': email.strip(),
        'address': address.strip(),
        'date_of_birth': date_of_birth,
    }
    if creating:
        cleaned['registered_date'] = registered_date
    return cleaned
