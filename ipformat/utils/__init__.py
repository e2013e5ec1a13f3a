from .validators import (
    int_to_ipv4,
    is_ipv4,
    is_ipv6,
    is_ip_address,
    detect_address_family
)
from .logging import setup_logging

__all__ = [
    'int_to_ipv4',
    'is_ipv4',
    'is_ipv6',
    'is_ip_address',
    'detect_address_family',
    'setup_logging'
]
