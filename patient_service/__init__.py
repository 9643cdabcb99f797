from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .extensions import db, migrate
from .exceptions import PatientServiceError
import logging
import os

__version__ = "0.1.0"

# Setup basic logging
logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(config_name=None, billing_client=None):
    """Create Flask application factory

    Args:
        config_name: key of patient_service.config.config; FLASK_ENV when omitted
        billing_client: object with create_patient_account(); built from
            config when omitted
    """
    app = Flask(__name__)

    # Load configuration
    if config_name:
        from patient_service.config import config
        config_class = config.get(config_name, config['default'])
    else:
        from patient_service.config import get_config
        config_class = get_config()
    if hasattr(config_class, 'validate'):
        config_class.validate()
    app.config.from_object(config_class)

    # Ensure production mode if FLASK_ENV is production
    if os.getenv('FLASK_ENV') == 'production':
        app.config['DEBUG'] = False
        app.config['TESTING'] = False

    db.init_app(app)
    migrate.init_app(app, db)

    from patient_service.utils.cors import init_cors
    init_cors(app)

    from patient_service.middleware import setup_middleware
    setup_middleware(app)

    register_error_handlers(app)
    setup_file_logging(app)

    # Explicit wiring: store and billing client are passed to the service
    from patient_service.clients import BillingServiceClient, DisabledBillingClient
    from patient_service.services import PatientService
    from patient_service.stores import SqlAlchemyPatientStore

    if billing_client is None:
        if app.config['BILLING_ENABLED']:
            billing_client = BillingServiceClient(
                app.config['BILLING_SERVICE_URL'],
                timeout=app.config['BILLING_SERVICE_TIMEOUT'],
            )
        else:
            billing_client = DisabledBillingClient()
    app.extensions['patient_service'] = PatientService(SqlAlchemyPatientStore(db), billing_client)

    from patient_service.cli import register_cli
    register_cli(app)

    with app.app_context():
        from .models import Patient  # noqa: F401  registers the table

        from .routes import patient_bp, health_bp
        app.register_blueprint(health_bp)
        app.register_blueprint(patient_bp)

        if app.config.get('AUTO_CREATE_TABLES'):
            db.create_all()

        if app.config.get('SEED_PATIENTS'):
            from .seeds import seed_patients
            seed_patients()

    return app


def register_error_handlers(app):
    """Translate service errors and unhandled exceptions into JSON responses"""

    @app.errorhandler(PatientServiceError)
    def handle_patient_service_error(e):
        if e.status_code >= 500:
            logger.error(f"{type(e).__name__}: {e.message}", exc_info=True)
        else:
            logger.warning(f"{type(e).__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'success': False,
            'error': 'Endpoint not found'
        }), 404

    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return jsonify({
                'success': False,
                'error': e.description
            }), e.code
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify({
            'success': False,
            'error': 'Internal server error. Check server logs for details.'
        }), 500


def setup_file_logging(app):
    """Rotating file log outside debug and testing"""
    if app.debug or app.testing:
        return

    from logging.handlers import RotatingFileHandler

    log_file = app.config['LOG_FILE']
    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10240000,
        backupCount=10
    )
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    ))
    file_handler.setLevel(app.config['LOG_LEVEL'].upper())
    app.logger.addHandler(file_handler)
    app.logger.setLevel(app.config['LOG_LEVEL'].upper())
    app.logger.info('Patient service startup')
