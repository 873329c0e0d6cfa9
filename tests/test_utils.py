import unittest

from voucherprint.utils import encode_text, get_obj_from_module, only_digits


class TestUtils(unittest.TestCase):
    def test_get_obj_from_module(self):
        with self.assertRaises(ImportError):
            get_obj_from_module('voucherprint.does.not.exists.I.hope', obj_name='FooBarBaz')

        with self.assertRaises(ImportError):
            get_obj_from_module('voucherprint.utils', obj_name='FooBarBazDoesNotExists')

        obj = get_obj_from_module('voucherprint.utils', obj_name='get_obj_from_module')
        self.assertEqual(obj, get_obj_from_module)

    def test_encode_text(self):
        self.assertEqual(encode_text('Valid Date'), b'Valid Date')
        self.assertEqual(encode_text('Año'), b'Ano')
        self.assertEqual(encode_text('A\x0cB\nC\x1bD'), b'ABCD')
        self.assertEqual(encode_text(b'bytes'), b'bytes')

    def test_only_digits(self):
        self.assertEqual(only_digits('01-0000 0001'), '0100000001')
        self.assertEqual(only_digits('ABC'), '')
