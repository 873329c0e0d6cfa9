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
The first ticket layout: fixed positions, no metadata.
"""

from voucherprint.composer import BarcodeField, TextField
from voucherprint.enum import TemplateType
from voucherprint.escpos import FONT_LARGE, FONT_NORMAL
from voucherprint.templates.base import BaseLayout, THANK_YOU


class PlainLayout(BaseLayout):
    name = TemplateType.PLAIN

    def get_fields(self, record, params):
        return [
            TextField(record.voucher_type, 300, 0, FONT_LARGE),
            TextField(self.get_valid_date_text(record), 320, 10, FONT_NORMAL),
            TextField(self.get_amount_text(record), 320, 15, FONT_NORMAL),
            BarcodeField(record.validation, 250, 25),
            # Human readable code, printed with the font of the amount
            TextField(record.validation, 320, 35),
            TextField(self.get_ticket_text(record), 280, 45, FONT_NORMAL),
            TextField(THANK_YOU, 320, 50, FONT_NORMAL),
        ]
