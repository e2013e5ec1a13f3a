"""
IPFormat Configuration Module

Configuration management using an optional INI-style config file.

Configuration precedence (highest to lowest):
1. Constructor arguments and environment variables (IPFORMAT_*)
2. Config file (INI format)
3. Default values

Config file search locations (first found wins):
1. Path given as config_file / IPFORMAT_CONFIG_FILE
2. ~/.config/ipformat/config.conf (user-specific, XDG standard)
3. ./ipformat.conf (current directory)
4. Built-in defaults (if no config file found)

Validation results never depend on configuration; it only controls
logging behaviour.

Author: IPFormat Project
License: GNU GPL v3
"""

from pydantic_settings import BaseSettings
from pydantic import Field, TypeAdapter, field_validator, model_validator
from typing import Optional
from pathlib import Path
import configparser
import logging
import os
import warnings


# INI sections whose keys map directly onto ValidatorConfig fields
CONFIG_SECTIONS = ('logging', 'validation')


def find_config_file(explicit: Optional[str] = None) -> Optional[Path]:
    """
    Search for a config file in standard locations.

    Args:
        explicit: Path requested by the caller or IPFORMAT_CONFIG_FILE

    Returns:
        Path to config file if found, None otherwise. A missing explicit
        path yields None; the standard locations are not searched.
    """
    if explicit:
        path = Path(explicit).expanduser()
        if path.exists():
            return path
        warnings.warn(f"Config file {explicit} does not exist, using defaults")
        return None

    xdg_config = os.environ.get('XDG_CONFIG_HOME')
    config_home = Path(xdg_config) if xdg_config else Path.home() / '.config'

    search_paths = [
        config_home / 'ipformat' / 'config.conf',
        Path('ipformat.conf'),
    ]

    for path in search_paths:
        if path.exists():
            return path

    return None


def load_config_file(explicit: Optional[str] = None) -> dict:
    """
    Load configuration values from the config file.

    Args:
        explicit: Optional path overriding the search locations

    Returns:
        Dictionary of field name -> raw string value
    """
    logger = logging.getLogger(__name__)
    config_file = find_config_file(explicit)

    if not config_file:
        logger.debug("No config file found, using environment variables and defaults")
        return {}

    # Values are taken literally; '$' in paths must not trigger interpolation
    parser = configparser.ConfigParser(interpolation=None)

    values = {}
    try:
        parser.read(config_file, encoding='utf-8')

        for section in CONFIG_SECTIONS:
            if not parser.has_section(section):
                continue
            for key, value in parser.items(section):
                # Strip inline comments (anything after #)
                value = value.split('#')[0].strip()
                if key in ('log_file', 'config_file'):
                    value = os.path.expanduser(value)
                values[key] = value
    except (configparser.Error, OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to parse {config_file}: {e}. Using defaults.")
        return {}

    logger.info(f"Loaded configuration from: {config_file}")
    return values


def _check_level(value: str) -> str:
    """Normalize a logging level name, rejecting unknown names"""
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid log level: '{value}'")
    return level


class ValidatorConfig(BaseSettings):
    """
    Package configuration with validation.

    Configuration is loaded from:
    1. Constructor arguments / environment variables (highest priority)
    2. Config file
    3. Default values (lowest priority)
    """

    config_file: Optional[str] = Field(
        default=None,
        description="Explicit path to an INI config file"
    )

    # === Logging ===
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_max_bytes: int = 10485760  # 10MB default
    log_backup_count: int = 5

    # === Validation ===
    log_rejections: bool = Field(
        default=False,
        description="Log rejected candidates at DEBUG level"
    )

    model_config = {
        'env_prefix': 'IPFORMAT_',
        'case_sensitive': False
    }

    @model_validator(mode='after')
    def apply_config_file(self):
        """Fill fields not given explicitly from the config file"""
        file_values = load_config_file(self.config_file)

        for name, raw in file_values.items():
            if name not in type(self).model_fields:
                logging.getLogger(__name__).warning(f"Ignoring unknown config option: {name}")
                continue
            if name == 'config_file' or name in self.model_fields_set:
                continue
            annotation = type(self).model_fields[name].annotation
            setattr(self, name, TypeAdapter(annotation).validate_python(raw))

        self.log_level = _check_level(self.log_level)
        return self

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return _check_level(value)

    def get_log_level(self) -> int:
        """Numeric logging level for log_level"""
        return logging.getLevelName(self.log_level)


# Global configuration instance (singleton pattern)
_config_instance = None


def get_config(reload: bool = False) -> ValidatorConfig:
    """
    Get global configuration instance with lazy initialization.

    Args:
        reload: Discard the cached instance and load configuration again
    """
    global _config_instance
    if _config_instance is None or reload:
        _config_instance = ValidatorConfig()
    return _config_instance
