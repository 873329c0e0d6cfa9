# -*- Mode: Python; coding: utf-8 -*-
# vi:si:et:sw=4:sts=4:ts=4

##
## Voucherprint
## Copyright (C) 2025 Stoq Tecnologia <http://stoq.com.br>
## All rights reserved
##
## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU General Public License as published by
## the Free Software Foundation; either version 2 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU General Public License for more details.
##
## You should have received a copy of the GNU General Public License
## along with this program; if not, write to the Free Software
## Foundation, Inc., 59 Temple Place - Suite 330, Boston, MA 02111-1307,
## USA.
##
"""
Spell monetary amounts in words, as printed on cash out tickets:

    >>> amount_to_words('1234.50')
    'ONE THOUSAND TWO HUNDRED THIRTY-FOUR PESOS AND FIFTY CENTAVOS'
"""

from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP

from voucherprint.exceptions import InvalidAmount
from voucherprint.translation import voucherprint_gettext

_ = voucherprint_gettext

ONES = ['ZERO', 'ONE', 'TWO', 'THREE', 'FOUR', 'FIVE', 'SIX', 'SEVEN',
        'EIGHT', 'NINE', 'TEN', 'ELEVEN', 'TWELVE', 'THIRTEEN', 'FOURTEEN',
        'FIFTEEN', 'SIXTEEN', 'SEVENTEEN', 'EIGHTEEN', 'NINETEEN']
TENS = ['', '', 'TWENTY', 'THIRTY', 'FORTY', 'FIFTY', 'SIXTY', 'SEVENTY',
        'EIGHTY', 'NINETY']
SCALES = ['', 'THOUSAND', 'MILLION', 'BILLION']


def parse_amount(amount):
    """Convert amount to a Decimal with two places

    :param amount: a number or a numeric string
    :raises: InvalidAmount if amount is not a finite, non-negative number
    """
    if isinstance(amount, bool):
        raise InvalidAmount(_("Invalid amount: %r") % (amount, ))
    if isinstance(amount, float):
        # Go through repr so that 0.1 does not become
        # 0.1000000000000000055511151231257827...
        amount = repr(amount)
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmount(_("Invalid amount: %r") % (amount, ))
    if not value.is_finite() or value < 0:
        raise InvalidAmount(_("Invalid amount: %r") % (amount, ))
    return value


def split_amount(amount):
    """Split amount in its integer and centavo parts

    Centavos are rounded half up; when the rounding reaches 100 the
    integer part is incremented instead.

    :returns: a (integer, centavos) tuple
    """
    value = parse_amount(amount)
    integer = int(value.to_integral_value(rounding=ROUND_FLOOR))
    cents = int(((value - integer) * 100).quantize(Decimal(1),
                                                   rounding=ROUND_HALF_UP))
    if cents == 100:
        integer += 1
        cents = 0
    return integer, cents


def _below_thousand(number):
    words = []
    hundreds, rest = divmod(number, 100)
    if hundreds:
        words.append('%s HUNDRED' % ONES[hundreds])
    if rest >= 20:
        tens, ones = divmod(rest, 10)
        if ones:
            words.append('%s-%s' % (TENS[tens], ONES[ones]))
        else:
            words.append(TENS[tens])
    elif rest:
        words.append(ONES[rest])
    return ' '.join(words)


def number_to_words(number):
    """Spell a non-negative integer, in uppercase english"""
    if number == 0:
        return ONES[0]

    chunks = []
    scale = 0
    while number:
        if scale >= len(SCALES):
            raise InvalidAmount(_("The amount is too large to be spelled"))
        number, chunk = divmod(number, 1000)
        # A zero chunk does not produce a "ZERO THOUSAND"
        if chunk:
            words = _below_thousand(chunk)
            if SCALES[scale]:
                words += ' ' + SCALES[scale]
            chunks.append(words)
        scale += 1
    return ' '.join(reversed(chunks))


def amount_to_words(amount):
    """Spell amount as pesos and centavos, in uppercase"""
    integer, cents = split_amount(amount)
    words = number_to_words(integer)
    words += ' PESO' if integer == 1 else ' PESOS'
    if cents == 0:
        words += ' AND NO CENTAVOS'
    else:
        words += ' AND ' + number_to_words(cents)
        words += ' CENTAVO' if cents == 1 else ' CENTAVOS'
    return words


def amount_to_sentence(amount):
    """Spell amount as pesos and centavos, only the first letter capitalized

        >>> amount_to_sentence('1.01')
        'One peso and one centavo'
    """
    return amount_to_words(amount).capitalize()
