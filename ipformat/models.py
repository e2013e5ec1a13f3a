"""
IPFormat Data Models

Data structures shared across the package.

This module defines:
- AddressFamily: Enum of the address families the validators recognize
- AddressCheck: Outcome of classifying one candidate address

Serialization: to_dict() and from_dict() methods for JSON output

Author: IPFormat Project
License: GNU GPL v3
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class AddressFamily(Enum):
    """
    Textual address families.

    Values:
        IPV4: Dotted-decimal, four octets
        IPV6: Colon-separated hex groups, optionally '::' compressed
    """
    IPV4 = "ipv4"
    IPV6 = "ipv6"


@dataclass
class AddressCheck:
    """
    Result of checking a single candidate address.

    Attributes:
        candidate: The text that was checked (repr() for non-string input)
        family: Detected family, or None when the candidate is invalid
    """
    candidate: str
    family: Optional[AddressFamily] = None

    @property
    def is_valid(self) -> bool:
        return self.family is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'candidate': self.candidate,
            'family': self.family.value if self.family else None,
            'valid': self.is_valid,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AddressCheck':
        """Create instance from dictionary (JSON deserialization)"""
        family = data.get('family')
        return cls(
            candidate=data.get('candidate', ''),
            family=AddressFamily(family) if family else None,
        )
