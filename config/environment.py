import os
import logging
from typing import Any

from config.settings import (
    SERVICE_NAME, SERVICE_VERSION, HOST, PORT,
    MAX_FILE_SIZE, HEAD_REQUEST_TIMEOUT
)

class Config:
    """Configuration class for Document File Service"""

    # Service Configuration
    SERVICE_NAME = SERVICE_NAME
    SERVICE_VERSION = SERVICE_VERSION
    HOST = os.getenv("FILE_SERVICE_HOST", HOST)
    PORT = int(os.getenv("FILE_SERVICE_PORT", str(PORT)))

    # File Configuration
    FILES = {
        "max_file_size": int(os.getenv("MAX_FILE_SIZE", str(MAX_FILE_SIZE))),
    }

    # HTTP Configuration
    HTTP = {
        "head_timeout": float(os.getenv("HEAD_REQUEST_TIMEOUT", str(HEAD_REQUEST_TIMEOUT)))
    }

    # Logging Configuration
    LOGGING = {
        "level": os.getenv("LOG_LEVEL", "INFO"),
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "file": os.getenv("LOG_FILE", "")
    }

    @classmethod
    def get_max_file_size(cls) -> int:
        """Get default size limit for remote files"""
        return cls.FILES["max_file_size"]

    @classmethod
    def get_http_config(cls, config_type: str) -> Any:
        """Get outbound HTTP configuration value"""
        return cls.HTTP.get(config_type, None)

    @classmethod
    def get_logging_config(cls, config_type: str) -> Any:
        """Get logging configuration value"""
        return cls.LOGGING.get(config_type, None)

# Environment-specific configurations
class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOGGING = dict(Config.LOGGING, level=os.getenv("LOG_LEVEL", "DEBUG"))

class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    LOGGING = dict(Config.LOGGING, level=os.getenv("LOG_LEVEL", "WARNING"))

class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    LOGGING = dict(Config.LOGGING, level="DEBUG", file="")
    # Keep outbound checks short in tests
    HTTP = dict(Config.HTTP, head_timeout=1.0)

# Configuration factory
def get_config() -> Config:
    """Get configuration based on environment"""
    env = os.getenv("ENVIRONMENT", "development").lower()

    if env == "production":
        return ProductionConfig()
    elif env == "testing":
        return TestingConfig()
    else:
        return DevelopmentConfig()

def setup_logging(cfg: Config = None) -> None:
    """Configure root logging from the active configuration"""
    cfg = cfg or config
    handlers = [logging.StreamHandler()]
    log_file = cfg.get_logging_config("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=cfg.get_logging_config("level").upper(),
        format=cfg.get_logging_config("format"),
        handlers=handlers,
        force=True
    )

# Global config instance
config = get_config()
