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
The voucher data printed on a ticket.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple, Optional

from voucherprint.words import parse_amount

_CENT = Decimal('0.01')

#: Values used when a request does not supply a field
DEFAULTS = {
    'voucher_type': 'CASHOUT TICKET',
    'valid_date': '01.01.2025',
    'amount': '0.00',
    'validation': '010000000000000001',
    'ticket_no': '0001',
    'time': '12:00:00',
}

# Request keys, as sent by the ticket web page
_REQUEST_KEYS = {
    'voucherType': 'voucher_type',
    'validDate': 'valid_date',
    'amount': 'amount',
    'validation': 'validation',
    'ticketNo': 'ticket_no',
    'time': 'time',
    'location': 'location',
    'assetNo': 'asset_no',
    'floor': 'floor',
}


class VoucherRecord(NamedTuple):
    voucher_type: str
    valid_date: str
    amount: Decimal
    validation: str
    ticket_no: str
    time: str
    location: Optional[str] = None
    asset_no: Optional[str] = None
    floor: Optional[str] = None

    @classmethod
    def create(cls, voucher_type, valid_date, amount, validation,
               ticket_no, time, location=None, asset_no=None, floor=None):
        """Create a record, validating and normalizing the amount

        :raises: InvalidAmount if amount is not a finite, non-negative number
        """
        amount = parse_amount(amount).quantize(_CENT, rounding=ROUND_HALF_UP)
        return cls(str(voucher_type), str(valid_date), amount,
                   str(validation), str(ticket_no), str(time),
                   location, asset_no, floor)

    @classmethod
    def from_request(cls, data):
        """Create a record from the fields of a print request

        Missing or empty fields are replaced by the values in DEFAULTS,
        missing metadata is left as None.
        """
        kwargs = {}
        for key, field in _REQUEST_KEYS.items():
            value = data.get(key)
            if value in (None, ''):
                value = DEFAULTS.get(field)
            kwargs[field] = value
        return cls.create(**kwargs)

    def get_amount_display(self):
        return str(self.amount)
