"""
Application settings and configuration.

Values come from the environment, optionally seeded from a ``.env`` file.
"""

import os
from typing import Optional, Dict, Any
from dotenv import load_dotenv

from ..validators.slot_validators import DEFAULT_DIGIT_MASK_CHARS

# Load environment variables
load_dotenv()


class Settings:
    """
    Application settings.

    Read once from the environment; tests build their own instances.
    """

    def __init__(self):
        """Initialize settings from environment and defaults."""
        # Validator Settings
        self.default_validator = os.getenv('DEFAULT_VALIDATOR', 'masked_digit')
        self.mask_placeholder_chars = os.getenv(
            'MASK_PLACEHOLDER_CHARS',
            ''.join(DEFAULT_DIGIT_MASK_CHARS)
        )

        # Logging Settings
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        self.log_file = os.getenv('LOG_FILE') or None

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if not found

        Returns:
            Configuration value
        """
        value = getattr(self, key, None)
        return value if value is not None else default

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'default_validator': self.default_validator,
            'mask_placeholder_chars': self.mask_placeholder_chars,
            'log_level': self.log_level,
            'log_format': self.log_format,
            'log_file': self.log_file,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
