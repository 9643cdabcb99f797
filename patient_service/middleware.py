"""
Middleware for request logging and security headers
"""
from flask import request
import logging

logger = logging.getLogger(__name__)


def setup_middleware(app):
    """Setup production middleware"""

    @app.before_request
    def log_request():
        """Log requests outside debug"""
        if not app.debug:
            logger.info(f"{request.method} {request.path} - {request.remote_addr}")

    @app.after_request
    def set_security_headers(response):
        """Add security headers to all responses"""
        if not app.debug:
            response.headers['X-Content-Type-Options'] = 'nosniff'
            response.headers['X-Frame-Options'] = 'DENY'
            response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
            if request.is_secure:
                response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response
