import os

from .logging_config import get_logger, get_logging_config

DEFAULT_REGION = "ap-northeast-1"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8123


class AppConfig:
    def __init__(self):
        self.region = os.getenv("SERVICE_REGION", "").strip() or DEFAULT_REGION
        self.host = os.getenv("SERVER_HOST", DEFAULT_HOST)
        self.port = int(os.getenv("SERVER_PORT", str(DEFAULT_PORT)))

        self.logging_config = get_logging_config()

        self.logging_config.setup_logging()
        self.logger = get_logger(__name__)

_app_config = None

def get_app_config() -> AppConfig:
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config

def reset_app_config() -> None:
    """Drop the cached config so the next get_app_config() re-reads the environment"""
    global _app_config
    _app_config = None
