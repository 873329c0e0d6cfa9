from decimal import Decimal
import unittest

from voucherprint.exceptions import InvalidAmount
from voucherprint.words import (amount_to_sentence, amount_to_words,
                                number_to_words, split_amount)


class TestNumberToWords(unittest.TestCase):
    def test_small_numbers(self):
        self.assertEqual(number_to_words(0), 'ZERO')
        self.assertEqual(number_to_words(7), 'SEVEN')
        self.assertEqual(number_to_words(13), 'THIRTEEN')
        self.assertEqual(number_to_words(20), 'TWENTY')
        self.assertEqual(number_to_words(42), 'FORTY-TWO')
        self.assertEqual(number_to_words(100), 'ONE HUNDRED')
        self.assertEqual(number_to_words(115), 'ONE HUNDRED FIFTEEN')
        self.assertEqual(number_to_words(999), 'NINE HUNDRED NINETY-NINE')

    def test_scales(self):
        self.assertEqual(number_to_words(1000), 'ONE THOUSAND')
        self.assertEqual(number_to_words(1000001), 'ONE MILLION ONE')
        self.assertEqual(number_to_words(2000300),
                         'TWO MILLION THREE HUNDRED')
        self.assertEqual(number_to_words(5000000000), 'FIVE BILLION')
        self.assertEqual(
            number_to_words(999999999999),
            'NINE HUNDRED NINETY-NINE BILLION '
            'NINE HUNDRED NINETY-NINE MILLION '
            'NINE HUNDRED NINETY-NINE THOUSAND '
            'NINE HUNDRED NINETY-NINE')

    def test_too_large(self):
        with self.assertRaises(InvalidAmount):
            number_to_words(10 ** 12)


class TestAmountToWords(unittest.TestCase):
    def test_zero(self):
        self.assertEqual(amount_to_sentence('0.00'),
                         'Zero pesos and no centavos')
        self.assertEqual(amount_to_words(0), 'ZERO PESOS AND NO CENTAVOS')

    def test_singular(self):
        self.assertEqual(amount_to_sentence(1.01), 'One peso and one centavo')
        self.assertEqual(amount_to_words('1'), 'ONE PESO AND NO CENTAVOS')

    def test_thousands(self):
        words = amount_to_words(1234.50)
        self.assertIn('ONE THOUSAND TWO HUNDRED THIRTY-FOUR', words)
        self.assertTrue(words.endswith('AND FIFTY CENTAVOS'), words)

    def test_peso_plural(self):
        for amount, expected in [('0.50', 'PESOS'), ('1.99', 'PESO'),
                                 ('2', 'PESOS'), ('1001', 'PESOS'),
                                 ('21.05', 'PESOS')]:
            words = amount_to_words(amount)
            self.assertTrue(words.split(' AND ')[0].endswith(expected),
                            (amount, words))

    def test_centavos(self):
        self.assertEqual(amount_to_words('10.25'),
                         'TEN PESOS AND TWENTY-FIVE CENTAVOS')
        self.assertEqual(amount_to_words('3.01'),
                         'THREE PESOS AND ONE CENTAVO')

    def test_rounding_carries(self):
        self.assertEqual(split_amount('0.999'), (1, 0))
        self.assertEqual(amount_to_words('0.999'), 'ONE PESO AND NO CENTAVOS')
        self.assertEqual(amount_to_words('999.995'),
                         'ONE THOUSAND PESOS AND NO CENTAVOS')

    def test_rounding_half_up(self):
        self.assertEqual(split_amount('2.345'), (2, 35))
        self.assertEqual(split_amount(Decimal('2.344')), (2, 34))

    def test_float_input(self):
        self.assertEqual(split_amount(0.1), (0, 10))
        self.assertEqual(split_amount(19.99), (19, 99))

    def test_invalid(self):
        for amount in ['', 'abc', '-1', -0.01, 'NaN', 'Infinity',
                       float('inf'), None, True]:
            with self.assertRaises(InvalidAmount):
                amount_to_words(amount)
