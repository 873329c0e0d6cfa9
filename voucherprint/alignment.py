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
Horizontal alignment of text and barcodes.

The printer has no way to report how wide a text will be, so positions
are computed from per font character widths measured on the device (see
the diagnostic template). The widths assume a monospaced font, which is
good enough for the ticket fonts.
"""

import logging
import math
from typing import NamedTuple

from voucherprint.escpos import FONT_LARGE, MAX_BARCODE_CHARACTERS
from voucherprint.exceptions import ConfigError
from voucherprint.utils import only_digits

log = logging.getLogger('voucherprint.alignment')

# Code128 symbols are 11 modules wide, except for the stop symbol
CODE128_SYMBOL_MODULES = 11
CODE128_STOP_MODULES = 13


class AlignmentParameters(NamedTuple):
    """Tuning constants of a printer

    They depend on the physical device and must be calibrated with the
    diagnostic ticket, never derived from the ticket contents.
    """

    #: Printable width of the page, in dots
    page_width: int = 950

    #: Width of a character printed with FONT_NORMAL, in dots
    normal_char_width: int = 12

    #: Width of a character printed with FONT_LARGE, in dots
    large_char_width: int = 18

    #: Distance kept from the right edge by right aligned text, in dots
    right_margin: int = 20

    #: Empirical rendered width of a barcode digit, in modules. This is a
    #: property of the printer firmware, not of Code128, and it was only
    #: measured for 18 digit validation codes.
    modules_per_character: float = 6.2

    #: Use code128b_width() instead of the empirical estimate
    exact_barcode_width: bool = False

    #: Quiet zone on each side of the barcode, in modules
    quiet_zone: int = 10

    barcode_height: int = 80
    barcode_module_width: int = 6
    max_barcode_length: int = MAX_BARCODE_CHARACTERS

    #: Rightmost marker and marker spacing of the calibration ruler
    ruler_max: int = 900
    ruler_step: int = 100

    @classmethod
    def from_config(cls, config):
        """Create the parameters overriding the defaults with the values
        found in a :class:`voucherprint.configparser.VoucherprintConfig`
        """
        values = {}
        for field, section in _CONFIG_FIELDS:
            try:
                raw = config.get_option(field, section)
            except ConfigError:
                continue
            convert = cls.__annotations__[field]
            try:
                if convert is bool:
                    values[field] = raw.strip().lower() in ('1', 'true',
                                                             'yes', 'on')
                else:
                    values[field] = convert(raw)
            except ValueError:
                raise ConfigError("Invalid value %r for option %s in "
                                  "section %s" % (raw, field, section))
        log.debug("Alignment parameters from config: %r", values)
        params = cls(**values)
        params.check()
        return params

    def check(self):
        """Make sure the parameters can be used to compose tickets

        :raises: ConfigError if any of the values is out of range
        """
        for field in ['page_width', 'normal_char_width', 'large_char_width',
                      'barcode_module_width', 'ruler_step']:
            if getattr(self, field) <= 0:
                raise ConfigError("%s must be greater than zero, got %r"
                                  % (field, getattr(self, field)))
        if not 0 <= self.ruler_max <= 0xffff:
            raise ConfigError("ruler_max must be between 0 and 65535, got %r"
                              % (self.ruler_max, ))

    def char_width(self, font=None):
        if font == FONT_LARGE:
            return self.large_char_width
        return self.normal_char_width

    def barcode_width(self, payload):
        """The rendered width of a barcode for payload, in dots"""
        length = len(only_digits(payload))
        if self.exact_barcode_width:
            return code128b_width(length, self.barcode_module_width,
                                  self.quiet_zone)
        return estimate_barcode_width(length, self.modules_per_character,
                                      self.barcode_module_width)


_CONFIG_FIELDS = [
    ('page_width', 'Alignment'),
    ('normal_char_width', 'Alignment'),
    ('large_char_width', 'Alignment'),
    ('right_margin', 'Alignment'),
    ('modules_per_character', 'Barcode'),
    ('exact_barcode_width', 'Barcode'),
    ('quiet_zone', 'Barcode'),
    ('barcode_height', 'Barcode'),
    ('barcode_module_width', 'Barcode'),
    ('max_barcode_length', 'Barcode'),
    ('ruler_max', 'Diagnostic'),
    ('ruler_step', 'Diagnostic'),
]


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def text_width(text, char_width):
    return len(text) * char_width


def center_position(text, char_width, page_width):
    """The x position that centers text on the page"""
    return max(0, (page_width - text_width(text, char_width)) // 2)


def right_position(text, char_width, page_width, margin=0):
    """The x position that makes text end margin dots before the edge"""
    return max(0, page_width - text_width(text, char_width) - margin)


def estimate_barcode_width(length, modules_per_character, module_width):
    """Approximate rendered width of a barcode, in dots

    :param length: number of encoded characters
    :param modules_per_character: empirical modules per character
    :param module_width: width of a module, in dots
    """
    return _round_half_up(length * modules_per_character) * module_width


def code128b_width(length, module_width, quiet_zone=10):
    """Exact width of a Code128-B symbol, in dots

    A symbol is made of a start character, the data characters, the
    checksum character and the stop pattern, with a quiet zone on both
    sides.
    """
    modules = (CODE128_SYMBOL_MODULES * (length + 2) +
               CODE128_STOP_MODULES + 2 * quiet_zone)
    return modules * module_width


def center_barcode(payload, params):
    """The x position that centers the barcode for payload on the page"""
    width = params.barcode_width(payload)
    return max(0, (params.page_width - width) // 2)
