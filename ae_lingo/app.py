"""
AE Lingo Application
====================
Flask application factory and main entry point.
"""
from flask import Flask, send_from_directory
from flask_cors import CORS

from ae_lingo.config import config
from ae_lingo.config.constants import MSG_SERVICE_UNAVAILABLE
from ae_lingo.database.connection import get_database
from ae_lingo.api.routes import (
    create_translation_blueprint,
    create_history_blueprint,
    create_health_blueprint,
    create_logs_blueprint
)
from ae_lingo.utils.logging import get_logger, debug_print


def create_app(testing: bool = False) -> Flask:
    """
    Application factory for Flask app.

    Args:
        testing: If True, configure for testing

    Returns:
        Configured Flask application
    """
    app = Flask(
        __name__,
        static_folder=config.paths.static_folder,
        static_url_path='/static'
    )

    # Base64 uploads are a third larger than the image they carry
    app.config.update(
        SECRET_KEY=config.server.secret_key,
        MAX_CONTENT_LENGTH=config.image.max_upload_bytes * 2,
        TESTING=testing
    )
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    cors_origins = config.server.cors_origins
    if testing:
        cors_origins = ['*']

    CORS(
        app,
        resources={r"/api/*": {"origins": cors_origins}},
        supports_credentials=True
    )

    if not testing:
        get_database()

    app.register_blueprint(create_translation_blueprint())
    app.register_blueprint(create_history_blueprint())
    app.register_blueprint(create_health_blueprint())
    app.register_blueprint(create_logs_blueprint())

    @app.errorhandler(400)
    def bad_request(e):
        return {'error': 'Bad request', 'details': str(e)}, 400

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Resource not found'}, 404

    @app.errorhandler(413)
    def payload_too_large(e):
        return {'error': f'Image too large. Maximum size is {config.image.max_upload_mb}MB'}, 413

    @app.errorhandler(500)
    def internal_error(e):
        get_logger().api_logger.error(f"Internal error: {e}")
        return {'error': MSG_SERVICE_UNAVAILABLE}, 500

    @app.route('/')
    def index():
        return send_from_directory(config.paths.static_folder, 'index.html')

    logger = get_logger()
    logger.api_logger.info(f"AE Lingo started on {config.server.host}:{config.server.port}")

    if not config.gemini.has_api_key:
        logger.app_logger.warning("GEMINI_API_KEY is not set; translations will fail until it is configured")

    if config.logging.verbose_debug:
        debug_print("🚀 Application initialized", 'INFO', 'APP')

    return app


def run_server():
    """Run the Flask development server."""
    app = create_app()

    print(f"""
============================================================
  AE Lingo - After Effects glossary translator
  Server: http://{config.server.host}:{config.server.port}
  Model:  {config.gemini.default_model}
  Debug:  {'Enabled' if config.server.debug else 'Disabled'}
============================================================
    """)

    app.run(
        host=config.server.host,
        port=config.server.port,
        debug=config.server.debug,
        threaded=True
    )


if __name__ == '__main__':
    run_server()
