import os
import unittest

from voucherprint.alignment import (AlignmentParameters, center_barcode,
                                    center_position, code128b_width,
                                    estimate_barcode_width, right_position,
                                    text_width)
from voucherprint.configparser import VoucherprintConfig
from voucherprint.escpos import FONT_LARGE, FONT_NORMAL
from voucherprint.exceptions import ConfigError

from tests.base import DATA_DIR


class TestTextAlignment(unittest.TestCase):
    def test_text_width(self):
        self.assertEqual(text_width('ABC', 12), 36)
        self.assertEqual(text_width('', 12), 0)

    def test_center(self):
        self.assertEqual(center_position('ABC', 12, 950), 457)
        self.assertEqual(center_position('', 12, 950), 475)
        # Odd remainders round down
        self.assertEqual(center_position('AB', 12, 951), 463)

    def test_center_wider_than_page(self):
        self.assertEqual(center_position('X' * 100, 12, 950), 0)

    def test_right(self):
        self.assertEqual(right_position('ABC', 12, 950, 20), 894)
        self.assertEqual(right_position('ABC', 12, 950), 914)
        self.assertEqual(right_position('X' * 100, 12, 950, 20), 0)


class TestBarcodeAlignment(unittest.TestCase):
    def test_estimate(self):
        # 18 * 6.2 = 111.6 modules, rounded to 112
        self.assertEqual(estimate_barcode_width(18, 6.2, 6), 672)
        # 5 * 6.2 = 31.0
        self.assertEqual(estimate_barcode_width(5, 6.2, 2), 62)
        # 0.5 rounds up
        self.assertEqual(estimate_barcode_width(1, 2.5, 1), 3)

    def test_code128b(self):
        # start + 3 chars + checksum = 5 * 11, stop = 13
        self.assertEqual(code128b_width(3, 1, quiet_zone=0), 68)
        self.assertEqual(code128b_width(3, 2, quiet_zone=10), 176)

    def test_center_barcode(self):
        params = AlignmentParameters()
        self.assertEqual(center_barcode('010000000000000001', params), 139)
        # Separators are not encoded, so they do not count
        self.assertEqual(center_barcode('01-0000-0000-0000-0001', params),
                         139)

    def test_center_barcode_exact(self):
        params = AlignmentParameters(exact_barcode_width=True,
                                     barcode_module_width=1, quiet_zone=0)
        # 11 * 20 + 13 = 233
        self.assertEqual(params.barcode_width('1' * 18), 233)
        self.assertEqual(center_barcode('1' * 18, params), 358)


class TestAlignmentParameters(unittest.TestCase):
    def test_defaults(self):
        params = AlignmentParameters()
        self.assertEqual(params.page_width, 950)
        self.assertEqual(params.char_width(FONT_NORMAL), 12)
        self.assertEqual(params.char_width(FONT_LARGE), 18)
        self.assertEqual(params.char_width(None), 12)
        self.assertEqual(params.modules_per_character, 6.2)
        self.assertEqual(params.max_barcode_length, 127)

    def test_from_config(self):
        config = VoucherprintConfig(os.path.join(DATA_DIR, 'voucherprint.conf'))
        params = AlignmentParameters.from_config(config)
        self.assertEqual(params.page_width, 1000)
        self.assertEqual(params.normal_char_width, 10)
        self.assertEqual(params.modules_per_character, 5.5)
        self.assertTrue(params.exact_barcode_width)
        self.assertEqual(params.ruler_step, 50)
        # Not in the file
        self.assertEqual(params.large_char_width, 18)
        self.assertEqual(params.right_margin, 20)

    def test_from_config_invalid_value(self):
        config = VoucherprintConfig(os.path.join(DATA_DIR, 'invalid.conf'))
        with self.assertRaises(ConfigError):
            AlignmentParameters.from_config(config)

    def test_check(self):
        AlignmentParameters().check()
        AlignmentParameters(ruler_max=0).check()
        for kwargs in [dict(ruler_step=0), dict(ruler_step=-100),
                       dict(ruler_max=-1), dict(ruler_max=70000),
                       dict(page_width=0), dict(normal_char_width=0),
                       dict(large_char_width=-18),
                       dict(barcode_module_width=0)]:
            with self.assertRaises(ConfigError):
                AlignmentParameters(**kwargs).check()

    def test_from_config_invalid_ruler(self):
        config = VoucherprintConfig(os.path.join(DATA_DIR, 'invalid-ruler.conf'))
        with self.assertRaises(ConfigError):
            AlignmentParameters.from_config(config)

    def test_missing_config(self):
        with self.assertRaises(ConfigError):
            VoucherprintConfig(os.path.join(DATA_DIR, 'does-not-exist.conf'))
