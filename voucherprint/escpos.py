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
Command primitives of the ticket printer.

The ticket printers speak a dialect of ESC/POS with absolute positioning
(ESC X / ESC Y), a point size font selector and a page orientation
command. Every function here is pure: it only returns the bytes of a
single command, the printer state lives in the command stream.
"""

from typing import NamedTuple

from voucherprint.enum import Alignment, Orientation
from voucherprint.capabilities import Capability
from voucherprint.exceptions import (InvalidBarcodePayload,
                                     PositionOutOfRange)
from voucherprint.translation import voucherprint_gettext
from voucherprint.utils import only_digits

_ = voucherprint_gettext

ESC = b'\x1b'  # Escape
GS = b'\x1d'  # Group Separator

RESET = ESC + b'*'
ORIENTATION = GS + b'V'
POSITION_X = ESC + b'X'  # Absolute horizontal position, in dots
POSITION_Y = ESC + b'Y'  # Absolute vertical position, in mm
FONT = ESC + b'F'  # Width, height (points) and bold flag
TXT_ALIGN = ESC + b'a'

BARCODE_HEIGHT = GS + b'h'  # Barcode Height [1-255]
BARCODE_WIDTH = GS + b'w'  # Module width
BARCODE_CODE128B = GS + b'k\x09'  # Code128-B, followed by length and data

LINE_FEED = b'\n'
FORM_FEED = b'\x0c'

#: The maximum number of characters that fit a barcode symbol
MAX_BARCODE_CHARACTERS = 127


class Font(NamedTuple):
    """Operands of the font select command"""
    width: int
    height: int
    bold: bool = False


FONT_NORMAL = Font(12, 12, False)
FONT_LARGE = Font(18, 12, True)

X_RANGE = Capability(min_size=0, max_size=0xffff, error=PositionOutOfRange)
Y_RANGE = Capability(min_size=0, max_size=0xff, error=PositionOutOfRange)
BYTE_RANGE = Capability(min_size=0, max_size=0xff)


def reset():
    """ Initialize the printer, dropping any previous settings. """
    return RESET


def position_x(pos):
    """ Move the cursor to an absolute horizontal position.

    The position is sent as two operands, the high byte first.

    :param pos: position in dots, 0 <= pos < 65536
    """
    X_RANGE.check_value(pos)
    high, low = divmod(pos, 256)
    return POSITION_X + bytes([high, low])


def position_y(y):
    """ Move the cursor to an absolute vertical position.

    :param y: position in millimeters, 0 <= y < 256
    """
    Y_RANGE.check_value(y)
    return POSITION_Y + bytes([y])


def select_font(width, height, bold=False):
    """ Select the font size, in points, and weight. """
    BYTE_RANGE.check_value(width)
    BYTE_RANGE.check_value(height)
    return FONT + bytes([width, height, 1 if bold else 0])


def select_orientation(landscape=True):
    if landscape:
        mode = Orientation.LANDSCAPE
    else:
        mode = Orientation.PORTRAIT
    return ORIENTATION + bytes([mode])


def select_alignment(mode):
    """ Justify the following text.

    :param mode: an :class:`Alignment` or its integer value
    """
    mode = Alignment(mode)
    return TXT_ALIGN + bytes([mode])


def barcode_block(payload, height=80, module_width=6,
                  max_length=MAX_BARCODE_CHARACTERS):
    """ The commands to print a Code128-B barcode.

    Everything that is not a digit is dropped from the payload before it
    is encoded, validation codes usually come with separators.

    :param payload: the code to be encoded
    :param height: bar height, in dots
    :param module_width: width of the narrowest bar, in dots
    :param max_length: the longest symbol the printer accepts
    """
    code = only_digits(payload)
    if not code:
        raise InvalidBarcodePayload(
            _("The barcode payload %r has no digits") % (payload, ))
    if len(code) > min(max_length, 0xff):
        raise InvalidBarcodePayload(
            _("The barcode payload can't be longer than %d digits, got %d")
            % (min(max_length, 0xff), len(code)))

    BYTE_RANGE.check_value(height)
    BYTE_RANGE.check_value(module_width)
    return (BARCODE_HEIGHT + bytes([height]) +
            BARCODE_WIDTH + bytes([module_width]) +
            BARCODE_CODE128B + bytes([len(code)]) +
            code.encode('ascii'))


def form_feed():
    """ Eject the page, this must be the last command of a ticket. """
    return FORM_FEED
