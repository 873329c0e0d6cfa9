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
Ticket layout with the machine location, asset and floor and the amount
spelled in words.
"""

from voucherprint.composer import BarcodeField, TextField
from voucherprint.enum import TemplateType
from voucherprint.escpos import FONT_LARGE, FONT_NORMAL
from voucherprint.templates.base import BaseLayout, THANK_YOU
from voucherprint.words import amount_to_words

BARCODE = 'barcode'

# Vertical position of each line, in mm
LINE_Y = {
    'title': 0,
    'location': 8,
    'asset': 13,
    'valid_date': 18,
    'amount': 23,
    'words': 28,
    BARCODE: 33,
    'validation': 43,
    'ticket': 48,
    'thanks': 53,
}

# Horizontal position of each line, in dots
LINE_X = {
    'title': 300,
    'words': 120,
    BARCODE: 250,
    'ticket': 280,
}
DEFAULT_X = 320


class DetailedLayout(BaseLayout):
    name = TemplateType.DETAILED

    def get_lines(self, record):
        """The (line, text, font) of each line of the ticket, in order.

        Lines without data on the voucher are left out, the barcode line
        carries the validation code.
        """
        lines = [('title', record.voucher_type, FONT_LARGE)]
        if record.location:
            lines.append(('location', record.location, FONT_NORMAL))
        asset = self.get_asset_text(record)
        if asset:
            lines.append(('asset', asset, FONT_NORMAL))
        lines.extend([
            ('valid_date', self.get_valid_date_text(record), FONT_NORMAL),
            ('amount', self.get_amount_text(record), FONT_NORMAL),
            ('words', amount_to_words(record.amount), FONT_NORMAL),
            (BARCODE, record.validation, None),
            ('validation', record.validation, FONT_NORMAL),
            ('ticket', self.get_ticket_text(record), FONT_NORMAL),
            ('thanks', THANK_YOU, FONT_NORMAL),
        ])
        return lines

    def get_x(self, line, text, font, params):
        return LINE_X.get(line, DEFAULT_X)

    def get_fields(self, record, params):
        fields = []
        for line, text, font in self.get_lines(record):
            x = self.get_x(line, text, font, params)
            if line == BARCODE:
                fields.append(BarcodeField(text, x, LINE_Y[line]))
            else:
                fields.append(TextField(text, x, LINE_Y[line], font))
        return fields
