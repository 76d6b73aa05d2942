from flask import Flask, jsonify
import logging
import os
from datetime import datetime, timezone

from app.exceptions import AcquisitionError

logger = logging.getLogger(__name__)


def create_app(config_name=None, overrides=None):
    logging.basicConfig(level=logging.INFO)
    app = Flask(__name__,
                template_folder='../templates',
                static_folder='../static')
    logger.info("Logger initialized at INFO level")

    # Load configuration from config.py
    from config import config, validate_settings

    # Determine config name from environment or parameter
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # Load the appropriate configuration
    app.config.from_object(config.get(config_name, config['development']))
    if overrides:
        app.config.update(overrides)
    validate_settings(app.config)

    # Override with additional settings for development
    if config_name == 'development':
        app.config.update(
            TEMPLATES_AUTO_RELOAD=True,
        )

    from app.cache import cache
    cache.init_app(app)

    # Composition root: one loader and one lead service per app
    from app.utils.portfolio_utils import build_portfolio_service
    from app.utils.emailjs_client import create_notifier
    from app.services.lead_service import LeadService
    app.extensions['portfolio_service'] = build_portfolio_service(app.config)
    app.extensions['lead_service'] = LeadService(
        create_notifier(app.config), phone_region=app.config.get('PHONE_DEFAULT_REGION'))

    from app.routes.main_routes import main_bp
    from app.routes.portfolio_routes import portfolio_bp
    from app.routes.portfolio_api import api_bp
    from app.routes.lead_routes import leads_bp
    from app.routes.admin_routes import admin_bp

    # Add security headers with Flask-Talisman (production only)
    if config_name == 'production':
        from flask_talisman import Talisman
        from flask_limiter import Limiter
        from flask_limiter.util import get_remote_address

        # Content Security Policy for the marketing site
        csp = {
            'default-src': "'self'",
            'script-src': [
                "'self'",
                "'unsafe-inline'",  # Needed for some inline scripts
            ],
            'style-src': [
                "'self'",
                "'unsafe-inline'",  # Needed for inline styles
                "https://fonts.googleapis.com"
            ],
            'img-src': [
                "'self'",
                "data:",
                "https:"
            ],
            'font-src': [
                "'self'",
                "https://fonts.gstatic.com"
            ],
            'connect-src': "'self'"
        }

        Talisman(
            app,
            force_https=True,
            strict_transport_security=True,
            strict_transport_security_max_age=31536000,  # 1 year
            content_security_policy=csp,
            referrer_policy='strict-origin-when-cross-origin',
        )
        logger.info("Security headers configured with Flask-Talisman")

        # Add rate limiting
        limiter = Limiter(
            key_func=get_remote_address,
            app=app,
            default_limits=["200 per hour", "50 per minute"],
            storage_uri="memory://",
            strategy="fixed-window"
        )
        limiter.limit(app.config['LEAD_RATE_LIMIT'])(leads_bp)

        # Store limiter in app for use in routes
        app.limiter = limiter
        logger.info("Rate limiting configured with Flask-Limiter")

    # Add context processor for templates
    @app.context_processor
    def inject_globals():
        return {
            'now': datetime.now(),
            'site_name': app.config['SITE_NAME'],
            'placeholder_image': app.config['PLACEHOLDER_IMAGE'],
        }

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(leads_bp)
    app.register_blueprint(admin_bp)

    @app.route('/health')
    def health_check():
        """Health check endpoint for Docker and load balancers."""
        try:
            service = app.extensions['portfolio_service']
            items = service.fetch_portfolio_data()

            return jsonify({
                'status': 'healthy',
                'timestamp': datetime.now(timezone.utc).isoformat(),
                'portfolio_items': len(items)
            }), 200
        except AcquisitionError as e:
            logger.error(f"Health check failed: {e}")
            return jsonify({
                'status': 'unhealthy',
                'timestamp': datetime.now(timezone.utc).isoformat(),
                'error': str(e)
            }), 503

    return app
