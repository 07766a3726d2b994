"""
Centralized Configuration for AE Lingo
======================================
All configuration values in one place, configurable via environment variables.
"""
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    elif val in ("false", "0", "no", "off"):
        return False
    return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer from environment variable."""
    try:
        return int(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def get_app_paths() -> Tuple[str, str]:
    """Get the correct paths based on execution environment."""
    if getattr(sys, 'frozen', False):
        app_dir = os.environ.get('AE_LINGO_APP_DIR', os.path.dirname(sys.executable))
        bundle_dir = os.environ.get('AE_LINGO_BUNDLE_DIR', getattr(sys, '_MEIPASS', app_dir))
    else:
        default_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        app_dir = os.environ.get('AE_LINGO_APP_DIR', default_dir)
        bundle_dir = os.environ.get('AE_LINGO_BUNDLE_DIR', app_dir)
    return app_dir, bundle_dir


APP_DIR, BUNDLE_DIR = get_app_paths()


@dataclass
class ServerConfig:
    """Flask server configuration."""
    host: str = field(default_factory=lambda: os.environ.get("AE_LINGO_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _get_int_env("AE_LINGO_PORT", 5001))
    debug: bool = field(default_factory=lambda: _get_bool_env("AE_LINGO_DEBUG", False))
    secret_key: str = field(default_factory=lambda: os.environ.get("SECRET_KEY", "dev-key-change-in-production"))

    cors_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:5001",
        "http://127.0.0.1:5001"
    ])


@dataclass
class GeminiConfig:
    """Gemini generative-language API configuration."""
    base_url: str = field(default_factory=lambda: os.environ.get(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    ))
    default_model: str = field(default_factory=lambda: os.environ.get("GEMINI_MODEL", "gemini-2.5-flash"))

    # Timeouts
    connect_timeout: int = field(default_factory=lambda: _get_int_env("GEMINI_CONNECT_TIMEOUT", 30))
    read_timeout: int = field(default_factory=lambda: _get_int_env("GEMINI_READ_TIMEOUT", 120))
    health_check_timeout: int = field(default_factory=lambda: _get_int_env("GEMINI_HEALTH_TIMEOUT", 5))

    @property
    def api_key(self) -> str:
        """API key, read from the environment on every access."""
        return os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY", "")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())


@dataclass
class ImageConfig:
    """Image preprocessing configuration."""
    max_dimension: int = field(default_factory=lambda: _get_int_env("IMAGE_MAX_DIMENSION", 1024))
    jpeg_quality: float = field(default_factory=lambda: _get_float_env("IMAGE_JPEG_QUALITY", 0.8))
    fallback_mime_type: str = field(default_factory=lambda: os.environ.get("IMAGE_FALLBACK_MIME", "image/png"))
    preprocess_enabled: bool = field(default_factory=lambda: _get_bool_env("IMAGE_PREPROCESS", True))
    max_upload_mb: int = field(default_factory=lambda: _get_int_env("MAX_UPLOAD_MB", 10))

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


@dataclass
class HistoryConfig:
    """Translation history configuration."""
    max_items: int = field(default_factory=lambda: _get_int_env("HISTORY_MAX_ITEMS", 10))
    storage_key: str = field(default_factory=lambda: os.environ.get("HISTORY_STORAGE_KEY", "ae_lingo_history"))
    snippet_length: int = field(default_factory=lambda: _get_int_env("HISTORY_SNIPPET_LENGTH", 30))


@dataclass
class TerminologyConfig:
    """Terminology glossary configuration."""
    glossary_path: Optional[str] = field(default_factory=lambda: os.environ.get("GLOSSARY_PATH") or None)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    verbose_debug: bool = field(default_factory=lambda: _get_bool_env("VERBOSE_DEBUG", True))
    log_buffer_size: int = field(default_factory=lambda: _get_int_env("LOG_BUFFER_SIZE", 500))
    log_file_max_bytes: int = field(default_factory=lambda: _get_int_env("LOG_FILE_MAX_BYTES", 10 * 1024 * 1024))
    log_file_backup_count: int = field(default_factory=lambda: _get_int_env("LOG_FILE_BACKUP_COUNT", 5))
    db_timeout: int = field(default_factory=lambda: _get_int_env("DB_TIMEOUT", 30))


@dataclass
class PathConfig:
    """Path configuration."""
    app_dir: str = field(default_factory=lambda: APP_DIR)
    bundle_dir: str = field(default_factory=lambda: BUNDLE_DIR)

    @property
    def static_folder(self) -> str:
        return os.path.join(self.bundle_dir, 'static')

    @property
    def log_folder(self) -> Path:
        return Path(self.app_dir) / 'logs'

    @property
    def db_path(self) -> str:
        return os.path.join(self.app_dir, 'ae_lingo.db')


@dataclass
class Config:
    """Main application configuration container."""
    server: ServerConfig = field(default_factory=ServerConfig)
    gemini: GeminiConfig = field(default_factory=GeminiConfig)
    image: ImageConfig = field(default_factory=ImageConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    terminology: TerminologyConfig = field(default_factory=TerminologyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    paths: PathConfig = field(default_factory=PathConfig)

    def __post_init__(self):
        """Create necessary directories after initialization."""
        self._create_directories()
        self._validate()

    def _create_directories(self):
        """Create necessary directories."""
        os.makedirs(self.paths.log_folder, exist_ok=True)

    def _validate(self):
        """Validate configuration values."""
        if self.image.max_dimension < 1:
            raise ValueError("max_dimension must be at least 1")
        if self.image.jpeg_quality <= 0 or self.image.jpeg_quality > 1:
            raise ValueError("jpeg_quality must be in (0, 1]")
        if self.image.max_upload_mb < 1:
            raise ValueError("max_upload_mb must be at least 1")
        if self.history.max_items < 1:
            raise ValueError("history max_items must be at least 1")


# Global configuration instance
config = Config()
