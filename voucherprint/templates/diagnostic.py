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
Calibration ticket.

Prints a ruler with a marker every ``ruler_step`` dots, a centered test
string and a centered test barcode. Comparing the printout with the
ruler tells how wide the printable area and the characters really are,
which is what AlignmentParameters must be set to.
"""

from voucherprint.alignment import center_barcode, center_position
from voucherprint.composer import BarcodeField, TextField
from voucherprint.enum import Alignment, TemplateType
from voucherprint.escpos import FONT_NORMAL
from voucherprint.templates.base import BaseLayout

TEST_STRING = "CENTER TEST 0123456789"
TEST_BARCODE = "010000000000000001"

RULER_Y = 0
TEST_STRING_Y = 10
PARAMETERS_Y = 15
TEST_BARCODE_Y = 25


class DiagnosticLayout(BaseLayout):
    name = TemplateType.DIAGNOSTIC
    needs_record = False

    def get_fields(self, record, params):
        fields = []
        for pos in range(0, params.ruler_max + 1, params.ruler_step):
            fields.append(TextField("|%d" % (pos, ), pos, RULER_Y,
                                    FONT_NORMAL))
        fields[0] = fields[0]._replace(justify=Alignment.LEFT)

        char_width = params.char_width(FONT_NORMAL)
        fields.append(TextField(
            TEST_STRING,
            center_position(TEST_STRING, char_width, params.page_width),
            TEST_STRING_Y, FONT_NORMAL))
        fields.append(TextField(
            "page=%d char=%d mpc=%s" % (params.page_width, char_width,
                                        params.modules_per_character),
            0, PARAMETERS_Y, FONT_NORMAL))
        fields.append(BarcodeField(TEST_BARCODE,
                                   center_barcode(TEST_BARCODE, params),
                                   TEST_BARCODE_Y))
        return fields
