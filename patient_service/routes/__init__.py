from .patient import patient_bp
from .health import health_bp

__all__ = ['patient_bp', 'health_bp']
