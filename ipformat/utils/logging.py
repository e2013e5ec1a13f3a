"""
IPFormat Logging Configuration

Centralized logging setup for applications embedding the validators.

Configures:
- Console output to stdout
- Optional file logging with rotation and gzip compression
- Log level management from configuration

Author: IPFormat Project
License: GNU GPL v3
"""

import logging
import logging.handlers
import sys
import os
import gzip
import shutil


LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def _gzip_rotator(source, dest):
    """
    Compress a rotated log file with gzip and remove the original.

    Args:
        source: Source log file path
        dest: Destination path for rotated log
    """
    with open(source, 'rb') as f_in:
        with gzip.open(f'{dest}.gz', 'wb') as f_out:
            shutil.copyfileobj(f_in, f_out)
    os.remove(source)


def setup_logging(level=None, config=None):
    """
    Configure root logging with console and optional rotating file handlers.

    Args:
        level: Logging level override (logging.INFO, logging.DEBUG, etc.).
            Defaults to the configured log_level.
        config: ValidatorConfig to read; the shared instance when omitted

    Returns:
        List of handlers attached to the root logger

    Example:
        >>> setup_logging(level=logging.DEBUG)  # Verbose mode
        >>> setup_logging()  # Level from configuration
    """
    if config is None:
        from ..config import get_config
        config = get_config()

    if level is None:
        level = config.get_log_level()

    handlers = [
        logging.StreamHandler(sys.stdout)
    ]

    if config.log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                config.log_file,
                maxBytes=config.log_max_bytes,
                backupCount=config.log_backup_count
            )
            file_handler.rotator = _gzip_rotator
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not create log file {config.log_file}: {e}", file=sys.stderr)
            print("Logging to console only", file=sys.stderr)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )

    return handlers
