"""
AE Lingo - After Effects plugin glossary translator
===================================================
This package provides a Flask-based service that sends After Effects plugin
parameter names, typed or captured in a screenshot, to the Gemini API and
returns an English/Chinese glossary with beginner explanations.

Version: 1.0.0
"""

__version__ = "1.0.0"

from ae_lingo.app import create_app, run_server

__all__ = ["create_app", "run_server", "__version__"]
