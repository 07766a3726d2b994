"""
AE Lingo - Configuration Module
"""
from ae_lingo.config.settings import Config, config
from ae_lingo.config.constants import (
    AE_GLOSSARY,
    GLOSSARY_VERSION,
    InputMode,
    LogLevel
)

__all__ = [
    "Config",
    "config",
    "AE_GLOSSARY",
    "GLOSSARY_VERSION",
    "InputMode",
    "LogLevel"
]
