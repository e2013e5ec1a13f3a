"""
IPFormat

Syntactic validation of textual IPv4/IPv6 addresses and dotted-decimal
formatting of packed IPv4 integers.

Author: IPFormat Project
License: GNU GPL v3
"""

__version__ = "1.0.0"

from .models import AddressFamily, AddressCheck
from .utils.validators import (
    int_to_ipv4,
    is_ipv4,
    is_ipv6,
    is_ip_address,
    detect_address_family
)
from .utils.logging import setup_logging
from .config import ValidatorConfig, get_config
from .checker import AddressChecker

__all__ = [
    'AddressFamily',
    'AddressCheck',
    'int_to_ipv4',
    'is_ipv4',
    'is_ipv6',
    'is_ip_address',
    'detect_address_family',
    'setup_logging',
    'ValidatorConfig',
    'get_config',
    'AddressChecker',
    '__version__'
]
