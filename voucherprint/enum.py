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
##

from enum import Enum, IntEnum


class TemplateType(Enum):
    """The layouts a ticket can be composed with"""

    #: The first generation ticket, fixed positions
    PLAIN = 'plain'

    #: Adds location, asset and floor metadata and the amount in words
    DETAILED = 'detailed'

    #: Same fields as DETAILED, positions computed from text widths
    ALIGNED = 'aligned'

    #: Calibration ruler, does not use a voucher
    DIAGNOSTIC = 'diagnostic'


class Alignment(IntEnum):
    """Text justification, values are the ESC a operand"""
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class Orientation(IntEnum):
    """Page orientation, values are the GS V operand"""
    PORTRAIT = 0
    LANDSCAPE = 1
