"""
IPFormat Address Checker

Classifies candidate address strings into AddressCheck records.

Wraps the stateless validators for callers that process many candidates,
e.g. addresses read from a configuration file or request parameters, and
need per-candidate results plus a summary.

Author: IPFormat Project
License: GNU GPL v3
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from .config import ValidatorConfig, get_config
from .models import AddressCheck, AddressFamily
from .utils.validators import detect_address_family


class AddressChecker:
    """Checks candidate addresses and records their family."""

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config if config is not None else get_config()
        self.logger = logging.getLogger(__name__)

    def check(self, value: Any) -> AddressCheck:
        """
        Classify a single candidate.

        Non-string input is never valid and is recorded with its repr()
        as the candidate.

        Args:
            value: Candidate address

        Returns:
            AddressCheck with the detected family (None when invalid)
        """
        if not isinstance(value, str):
            if self.config.log_rejections:
                self.logger.debug(f"Rejected non-string candidate of type {type(value).__name__}")
            return AddressCheck(candidate=repr(value))

        result = AddressCheck(candidate=value, family=detect_address_family(value))

        if not result.is_valid and self.config.log_rejections:
            self.logger.debug(f"Rejected candidate: {value!r}")

        return result

    def check_many(self, values: Iterable[Any]) -> List[AddressCheck]:
        """Classify candidates, preserving input order."""
        return [self.check(value) for value in values]

    @staticmethod
    def summarize(results: Iterable[AddressCheck]) -> Dict[str, int]:
        """
        Count results per family.

        Returns:
            Dict with 'total', 'ipv4', 'ipv6' and 'invalid' counts
        """
        summary = {'total': 0, 'ipv4': 0, 'ipv6': 0, 'invalid': 0}
        for result in results:
            summary['total'] += 1
            if result.family is AddressFamily.IPV4:
                summary['ipv4'] += 1
            elif result.family is AddressFamily.IPV6:
                summary['ipv6'] += 1
            else:
                summary['invalid'] += 1
        return summary
