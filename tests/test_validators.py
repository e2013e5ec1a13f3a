"""
Test Suite for Address Format Validators

Covers:
- Packed integer to IPv4 string conversion
- IPv4 dotted-decimal validation
- IPv6 standard, compressed and boundary-compressed forms
- Address family detection

Author: IPFormat Project
License: GNU GPL v3
"""

import random
import unittest

from ipformat.models import AddressFamily
from ipformat.utils.validators import (
    int_to_ipv4,
    is_ipv4,
    is_ipv6,
    is_ip_address,
    detect_address_family
)


class TestIntToIPv4(unittest.TestCase):
    """Test packed integer conversion."""

    def test_known_values(self):
        self.assertEqual(int_to_ipv4(0), "0.0.0.0")
        self.assertEqual(int_to_ipv4(4294967295), "255.255.255.255")
        self.assertEqual(int_to_ipv4(16909060), "1.2.3.4")
        self.assertEqual(int_to_ipv4(0xC0A80101), "192.168.1.1")

    def test_reassembles_to_original_value(self):
        """Octets of the output must rebuild the input integer."""
        rng = random.Random(1234)
        samples = [0, 1, 255, 256, 0x7F000001, 0xFFFFFFFF]
        samples.extend(rng.randrange(0, 2 ** 32) for _ in range(200))

        for value in samples:
            octets = [int(part) for part in int_to_ipv4(value).split('.')]
            self.assertEqual(len(octets), 4)
            self.assertTrue(all(0 <= octet <= 255 for octet in octets))
            rebuilt = (octets[0] << 24) | (octets[1] << 16) | (octets[2] << 8) | octets[3]
            self.assertEqual(rebuilt, value)

    def test_output_is_valid_ipv4(self):
        self.assertTrue(is_ipv4(int_to_ipv4(0x0A000001)))

    def test_ignores_bits_above_32(self):
        self.assertEqual(int_to_ipv4((1 << 32) | 16909060), "1.2.3.4")

    def test_rejects_non_integers(self):
        for value in ("1.2.3.4", 1.5, None):
            with self.assertRaises(TypeError):
                int_to_ipv4(value)

    def test_rejects_negative_values(self):
        for value in (-1, -16909060, -(2 ** 32)):
            with self.assertRaises(ValueError):
                int_to_ipv4(value)


class TestIsIPv4(unittest.TestCase):
    """Test IPv4 validation."""

    def test_accepts_valid_addresses(self):
        for address in ["192.168.1.1", "0.0.0.0", "255.255.255.255",
                        "10.0.0.1", "8.8.8.8", "249.199.99.9"]:
            self.assertTrue(is_ipv4(address), address)

    def test_rejects_out_of_range_octets(self):
        for address in ["256.1.1.1", "1.1.1.256", "300.300.300.300", "1.1.1.1000"]:
            self.assertFalse(is_ipv4(address), address)

    def test_rejects_wrong_group_count(self):
        for address in ["1.2.3", "1.2.3.4.5", "1", "1.2.3.", ".1.2.3", "1..2.3"]:
            self.assertFalse(is_ipv4(address), address)

    def test_rejects_surrounding_text(self):
        for address in [" 1.2.3.4", "1.2.3.4 ", "1.2.3.4\n", "a1.2.3.4", "1.2.3.4/24"]:
            self.assertFalse(is_ipv4(address), repr(address))

    def test_tolerates_single_leading_zero(self):
        self.assertTrue(is_ipv4("010.001.01.1"))

    def test_rejects_non_ascii_digits(self):
        self.assertFalse(is_ipv4("１.2.3.4"))

    def test_rejects_empty_and_non_string(self):
        for value in ["", None, 16909060, b"1.2.3.4"]:
            self.assertFalse(is_ipv4(value), repr(value))


class TestIsIPv6(unittest.TestCase):
    """Test IPv6 validation."""

    def test_accepts_standard_form(self):
        self.assertTrue(is_ipv6("fe80:0000:8030:49ec:1fc6:57fa:ab52:fe69"))
        self.assertTrue(is_ipv6("FE80:0:0:0:0:0:0:1"))
        self.assertTrue(is_ipv6("1:2:3:4:5:6:7:8"))

    def test_rejects_single_group_compression_with_seven_colons(self):
        """'::' replacing one zero group must be rejected."""
        self.assertFalse(is_ipv6("fe80::8030:49ec:1fc6:57fa:ab52:fe69"))
        self.assertFalse(is_ipv6("1:2:3:4:5::6:7"))
        self.assertFalse(is_ipv6("1:2:3:4:5:6::7"))

    def test_accepts_boundary_compression(self):
        self.assertTrue(is_ipv6("::2:3:4:5:6:7"))
        self.assertTrue(is_ipv6("1:2:3:4:5:6::"))

    def test_rejects_malformed_boundary_compression(self):
        self.assertFalse(is_ipv6("::2:3:4:5:6:7:"))
        self.assertFalse(is_ipv6(":1:2:3:4:5:6::"))
        self.assertFalse(is_ipv6("::12345:3:4:5:6:7"))

    def test_accepts_general_compression(self):
        for address in ["::1", "::", "2001:db8::1", "fe80::", "1::8",
                        "1:2:3:4::5:6", "2001:DB8:0:0:8::417A"]:
            self.assertTrue(is_ipv6(address), address)

    def test_rejects_bad_compression(self):
        for address in [":::", "1::2::3", "::1::", ":1::2", "1::2:", "1:::2"]:
            self.assertFalse(is_ipv6(address), address)

    def test_rejects_too_many_colons(self):
        self.assertFalse(is_ipv6("1:2:3:4:5:6:7:8:9"))
        self.assertFalse(is_ipv6("1:2:3:4:5:6:7::"))

    def test_rejects_incomplete_standard_form(self):
        self.assertFalse(is_ipv6("1:2:3:4:5:6:7"))
        self.assertFalse(is_ipv6("1:2:3:4:5:6:7:"))

    def test_rejects_invalid_groups(self):
        for address in ["12345::1", "g::1", "2001:db8::1/64", "fe80::1%eth0",
                        "::ffff:192.168.1.1", " ::1", "::1\n"]:
            self.assertFalse(is_ipv6(address), repr(address))

    def test_rejects_empty_and_non_string(self):
        for value in ["", None, 1, b"::1"]:
            self.assertFalse(is_ipv6(value), repr(value))


class TestAddressFamilyDetection(unittest.TestCase):
    """Test combined IPv4/IPv6 helpers."""

    def test_detects_family(self):
        self.assertEqual(detect_address_family("192.168.1.1"), AddressFamily.IPV4)
        self.assertEqual(detect_address_family("2001:db8::1"), AddressFamily.IPV6)
        self.assertIsNone(detect_address_family("example.com"))
        self.assertIsNone(detect_address_family(None))

    def test_is_ip_address(self):
        self.assertTrue(is_ip_address("10.0.0.1"))
        self.assertTrue(is_ip_address("::1"))
        self.assertFalse(is_ip_address("10.0.0"))
        self.assertFalse(is_ip_address(""))


if __name__ == '__main__':
    unittest.main()
