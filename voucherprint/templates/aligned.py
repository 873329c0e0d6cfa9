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
The detailed ticket, with positions computed by the alignment calculator
instead of fixed ones.
"""

from voucherprint.alignment import (center_barcode, center_position,
                                    right_position)
from voucherprint.enum import Alignment, TemplateType
from voucherprint.templates.detailed import BARCODE, DetailedLayout
from voucherprint.utils import encode_text


class AlignedLayout(DetailedLayout):
    name = TemplateType.ALIGNED

    #: Lines aligned to the right margin, everything else is centered
    right_aligned = ['ticket']

    def get_x(self, line, text, font, params):
        if line == BARCODE:
            return center_barcode(text, params)
        # Measure what is actually printed
        text = encode_text(text).decode('ascii')
        char_width = params.char_width(font)
        if line in self.right_aligned:
            return right_position(text, char_width, params.page_width,
                                  params.right_margin)
        return center_position(text, char_width, params.page_width)

    def get_fields(self, record, params):
        fields = DetailedLayout.get_fields(self, record, params)
        # The positions are absolute, make sure the printer is not
        # justifying the text on its own
        fields[0] = fields[0]._replace(justify=Alignment.LEFT)
        return fields
