"""
Liveness and readiness endpoints for the container orchestrator
"""
import logging
from datetime import datetime, timezone

from flask import Blueprint, jsonify

from patient_service import __version__
from patient_service.extensions import db
from patient_service.models import Patient

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__, url_prefix='/health')


def _now():
    return datetime.now(timezone.utc).isoformat()


@health_bp.route('', methods=['GET'])
@health_bp.route('/live', methods=['GET'])
def liveness_check():
    """Process is up; does not touch the database"""
    return jsonify({
        'status': 'alive',
        'service': 'patient-service',
        'version': __version__,
        'timestamp': _now()
    }), 200


@health_bp.route('/ready', methods=['GET'])
def readiness_check():
    """Ready once the patients table can be read"""
    try:
        db.session.execute(db.select(Patient.id).limit(1)).first()
    except Exception as e:
        db.session.rollback()
        logger.error(f"Readiness check failed, patients table unreachable: {e}", exc_info=True)
        return jsonify({
            'status': 'not_ready',
            'database': 'error',
            'timestamp': _now()
        }), 503

    return jsonify({
        'status': 'ready',
        'database': 'connected',
        'timestamp': _now()
    }), 200
