import unittest

from voucherprint.capabilities import Capability
from voucherprint.exceptions import CapabilityError, PositionOutOfRange


class TestCapability(unittest.TestCase):
    def test_check_value(self):
        capability = Capability(min_size=0, max_size=255)
        capability.check_value(0)
        capability.check_value(255)
        for value in [-1, 256]:
            with self.assertRaises(CapabilityError):
                capability.check_value(value)

    def test_not_integer(self):
        capability = Capability(min_size=0, max_size=255)
        for value in [1.0, '1', None, True]:
            with self.assertRaises(CapabilityError):
                capability.check_value(value)

    def test_error_class(self):
        capability = Capability(max_size=10, error=PositionOutOfRange)
        capability.check_value(-100)
        with self.assertRaises(PositionOutOfRange):
            capability.check_value(11)

    def test_invalid_limits(self):
        with self.assertRaises(ValueError):
            Capability(min_size=10, max_size=1)
