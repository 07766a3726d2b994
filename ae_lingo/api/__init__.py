"""
API Module
==========
Flask API routes and blueprints.
"""
from ae_lingo.api.routes import (
    create_translation_blueprint,
    create_history_blueprint,
    create_health_blueprint,
    create_logs_blueprint
)

__all__ = [
    'create_translation_blueprint',
    'create_history_blueprint',
    'create_health_blueprint',
    'create_logs_blueprint'
]
