from flask import Blueprint, request, jsonify

from patient_service.services import get_patient_service
from patient_service.utils import validate_patient_payload

patient_bp = Blueprint('patient', __name__, url_prefix='/patients')


def _json_body():
    """Decoded JSON body, or None when the request is not JSON"""
    return request.get_json(silent=True)


@patient_bp.route('', methods=['GET'])
def list_patients():
    """
    List all patients
    """
    patients = get_patient_service().get_patients()
    return jsonify({
        'success': True,
        'data': patients,
        'count': len(patients)
    }), 200


@patient_bp.route('/<patient_id>', methods=['GET'])
def get_patient(patient_id):
    """
    Get single patient by ID
    """
    return jsonify({
        'success': True,
        'data': get_patient_service().get_patient(patient_id)
    }), 200


@patient_bp.route('', methods=['POST'])
def create_patient():
    """
    Create new patient
    Body: name, email, address, dateOfBirth, registeredDate
    """
    data = _json_body()
    if data is None:
        return jsonify({
            'success': False,
            'error': 'Request body must be JSON'
        }), 400

    patient = get_patient_service().create_patient(
        validate_patient_payload(data, creating=True)
    )
    return jsonify({
        'success': True,
        'data': patient,
        'message': 'Patient created successfully'
    }), 200


@patient_bp.route('/<patient_id>', methods=['PUT'])
def update_patient(patient_id):
    """
    Update patient information
    Body: name, email, address, dateOfBirth (registeredDate is ignored)
    """
    data = _json_body()
    if data is None:
        return jsonify({
            'success': False,
            'error': 'Request body must be JSON'
        }), 400

    patient = get_patient_service().update_patient(
        patient_id, validate_patient_payload(data)
    )
    return jsonify({
        'success': True,
        'data': patient,
        'message': 'Patient updated successfully'
    }), 200


@patient_bp.route('/<patient_id>', methods=['DELETE'])
def delete_patient(patient_id):
    """
    Permanently delete a patient
    """
    get_patient_service().delete_patient(patient_id)
    return '', 204
