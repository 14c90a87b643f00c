"""Configuration settings for keymint."""

import os


class Config:
    """Base configuration class."""

    # random.org Configuration
    RANDOM_ORG_URL = os.environ.get(
        "RANDOM_ORG_URL", "https://api.random.org/json-rpc/4/invoke"
    )
    RANDOM_ORG_API_KEY = os.environ.get("RANDOM_ORG_API_KEY")
    RANDOM_ORG_TIMEOUT = float(os.environ.get("RANDOM_ORG_TIMEOUT", 10))  # seconds

    # Background execution
    MAX_WORKERS = int(os.environ.get("MAX_WORKERS", 4))

    # Generation defaults
    PASSWORD_DEFAULT_LENGTH = int(os.environ.get("PASSWORD_DEFAULT_LENGTH", 32))
    DEFAULT_KEY_SIZE = int(os.environ.get("DEFAULT_KEY_SIZE", 4096))

    # Logging Configuration
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR = os.environ.get("LOG_DIR")  # file logging disabled when unset
    LOG_FILE = os.environ.get("LOG_FILE", "keymint.log")
    LOG_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", 10485760))  # 10MB
    LOG_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", 10))
    LOG_FORMAT = os.environ.get(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    )
    ENABLE_JSON_LOGGING = (
        os.environ.get("ENABLE_JSON_LOGGING", "false").lower() == "true"
    )
    ENABLE_CONSOLE_LOGGING = (
        os.environ.get("ENABLE_CONSOLE_LOGGING", "true").lower() == "true"
    )

    # Separate Log Files
    AUDIT_LOG_FILE = os.environ.get("AUDIT_LOG_FILE", "audit.log")


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
    ENABLE_JSON_LOGGING = (
        os.environ.get("ENABLE_JSON_LOGGING", "true").lower() == "true"
    )


class TestingConfig(Config):
    """Testing configuration."""

    RANDOM_ORG_URL = "https://random-org.test/json-rpc/4/invoke"
    RANDOM_ORG_API_KEY = "test-api-key"
    RANDOM_ORG_TIMEOUT = 1.0
    MAX_WORKERS = 2
    LOG_LEVEL = "ERROR"
    LOG_DIR = None
    ENABLE_CONSOLE_LOGGING = False


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
