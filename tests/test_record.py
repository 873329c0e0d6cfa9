from decimal import Decimal
import unittest

from voucherprint.exceptions import InvalidAmount
from voucherprint.record import DEFAULTS, VoucherRecord


class TestVoucherRecord(unittest.TestCase):
    def test_from_empty_request(self):
        record = VoucherRecord.from_request({})
        self.assertEqual(record.voucher_type, 'CASHOUT TICKET')
        self.assertEqual(record.valid_date, '01.01.2025')
        self.assertEqual(record.amount, Decimal('0.00'))
        self.assertEqual(record.validation, '010000000000000001')
        self.assertEqual(record.ticket_no, '0001')
        self.assertEqual(record.time, '12:00:00')
        self.assertIsNone(record.location)
        self.assertIsNone(record.asset_no)
        self.assertIsNone(record.floor)

    def test_from_request(self):
        record = VoucherRecord.from_request({
            'voucherType': 'JACKPOT',
            'validDate': '31.12.2025',
            'amount': '1500.5',
            'validation': '12-3456',
            'ticketNo': '0042',
            'time': '23:59:00',
            'location': 'Main Hall',
            'assetNo': '1021',
            'floor': '2',
        })
        self.assertEqual(record.voucher_type, 'JACKPOT')
        self.assertEqual(record.amount, Decimal('1500.50'))
        self.assertEqual(record.get_amount_display(), '1500.50')
        self.assertEqual(record.validation, '12-3456')
        self.assertEqual(record.location, 'Main Hall')
        self.assertEqual(record.asset_no, '1021')
        self.assertEqual(record.floor, '2')

    def test_empty_values_use_defaults(self):
        record = VoucherRecord.from_request({'amount': '', 'ticketNo': None})
        self.assertEqual(record.amount, Decimal('0.00'))
        self.assertEqual(record.ticket_no, DEFAULTS['ticket_no'])

    def test_numeric_amount(self):
        record = VoucherRecord.from_request({'amount': 12.345})
        self.assertEqual(record.amount, Decimal('12.35'))
        record = VoucherRecord.from_request({'amount': 0})
        self.assertEqual(record.get_amount_display(), '0.00')

    def test_invalid_amount(self):
        for amount in ['-5', 'ten', 'inf']:
            with self.assertRaises(InvalidAmount):
                VoucherRecord.from_request({'amount': amount})

    def test_immutable(self):
        record = VoucherRecord.from_request({})
        with self.assertRaises(AttributeError):
            record.amount = Decimal('100')
