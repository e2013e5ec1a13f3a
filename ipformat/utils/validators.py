"""
IPFormat Address Validators

Textual IP address validation and formatting utilities.

Provides:
- Packed integer to dotted-decimal IPv4 conversion
- IPv4 dotted-decimal validation
- IPv6 validation, including '::' zero-block compression
- Address family detection

Validation is purely syntactic: nothing is normalized, and invalid input
always yields False rather than an exception.

Author: IPFormat Project
License: GNU GPL v3
"""

import operator
import re
from typing import Any, Optional

from ..models import AddressFamily


_IPV4_OCTET = r'(?:25[0-5]|2[0-4][0-9]|[0-1]?[0-9]?[0-9])'
_IPV6_GROUP = r'[0-9A-Fa-f]{1,4}'

IPV4_PATTERN = re.compile(rf'{_IPV4_OCTET}(?:\.{_IPV4_OCTET}){{3}}')

# Eight groups, no compression
IPV6_STD_PATTERN = re.compile(rf'(?:{_IPV6_GROUP}:){{7}}{_IPV6_GROUP}')

# Single '::' with optional groups on either side
IPV6_COMPRESS_PATTERN = re.compile(
    rf'(?:{_IPV6_GROUP}(?::{_IPV6_GROUP})*)?::(?:(?:{_IPV6_GROUP}:)*{_IPV6_GROUP})?'
)

# Two zero groups compressed at the start or the end keep all seven colons
IPV6_COMPRESS_BORDER_PATTERN = re.compile(
    rf'::{_IPV6_GROUP}(?::{_IPV6_GROUP}){{5}}'
    rf'|{_IPV6_GROUP}(?::{_IPV6_GROUP}){{5}}::'
)

MAX_IPV6_COLONS = 7


def int_to_ipv4(value: int) -> str:
    """
    Convert a packed integer to a dotted-decimal IPv4 string.

    The low 32 bits hold the address, most significant octet first.
    Higher bits are ignored.

    Args:
        value: Non-negative integer (or integer-like object) holding the address

    Returns:
        Dotted-decimal string with exactly four octets

    Raises:
        TypeError: If value is not an integer
        ValueError: If value is negative

    Example:
        >>> int_to_ipv4(16909060)
        '1.2.3.4'
        >>> int_to_ipv4(0xFFFFFFFF)
        '255.255.255.255'
    """
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"Packed IPv4 address must be non-negative, got {value}")

    octets = []
    for _ in range(4):
        octets.insert(0, str(value & 0xFF))
        value >>= 8

    return '.'.join(octets)


def is_ipv4(value: Any) -> bool:
    """
    Validate if string is a dotted-decimal IPv4 address.

    Args:
        value: Candidate address

    Returns:
        True if value is four decimal octets (0-255) separated by dots

    Example:
        >>> is_ipv4("192.168.1.1")
        True
        >>> is_ipv4("256.1.1.1")
        False
    """
    if not isinstance(value, str):
        return False
    return IPV4_PATTERN.fullmatch(value) is not None


def is_ipv6(value: Any) -> bool:
    """
    Validate if string is a textual IPv6 address.

    Accepts the full eight-group form and '::' compressed forms. A '::'
    must stand for at least two zero groups, so seven-colon strings are
    only accepted when compressed at the very start or end.

    Args:
        value: Candidate address

    Returns:
        True if value is a well-formed IPv6 address

    Example:
        >>> is_ipv6("2001:db8::1")
        True
        >>> is_ipv6("fe80::8030:49ec:1fc6:57fa:ab52:fe69")
        False
    """
    if not isinstance(value, str):
        return False

    colons = value.count(':')
    if colons > MAX_IPV6_COLONS:
        return False

    if IPV6_STD_PATTERN.fullmatch(value):
        return True

    if colons == MAX_IPV6_COLONS:
        return IPV6_COMPRESS_BORDER_PATTERN.fullmatch(value) is not None

    return IPV6_COMPRESS_PATTERN.fullmatch(value) is not None


def is_ip_address(value: Any) -> bool:
    """Validate if string is an IPv4 or IPv6 address."""
    return is_ipv4(value) or is_ipv6(value)


def detect_address_family(value: Any) -> Optional[AddressFamily]:
    """
    Determine which address family a candidate string belongs to.

    Returns:
        AddressFamily.IPV4, AddressFamily.IPV6, or None if neither
    """
    if is_ipv4(value):
        return AddressFamily.IPV4
    if is_ipv6(value):
        return AddressFamily.IPV6
    return None
