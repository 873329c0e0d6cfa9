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
## Author(s):   Henrique Romano <henrique@async.com.br>
##
"""
Value limits of the printer command operands.
"""

from numbers import Real
from typing import Optional

from voucherprint.exceptions import CapabilityError


class Capability:
    """ This class is used to represent a printer capability, offering
    methods to validate a value with base in the capability limits.
    """

    def __init__(self, min_size: Optional[Real]=None,
                 max_size: Optional[Real]=None, error=CapabilityError):
        """ Creates a new capability, the range of values accepted by a
        command operand.

        @param min_size:   The minimum size for a value
        @type min_size:    number
        @param max_size:   The maximum size for a value
        @type max_size:    number
        @param error:      The exception class raised by check_value
        """
        if (min_size is not None and max_size is not None and
                min_size > max_size):
            raise ValueError("min_size can't be greater than max_size")
        self.min_size = min_size
        self.max_size = max_size
        self.error = error

    def check_value(self, value):
        # bool is an int subclass but never a valid operand
        if isinstance(value, bool) or not isinstance(value, int):
            raise self.error("the value must be an integer, got %r" % (value, ))

        if self.max_size is not None and value > self.max_size:
            raise self.error("the value can't be greater than %r"
                             % self.max_size)
        elif self.min_size is not None and value < self.min_size:
            raise self.error("the value can't be less than %r"
                             % self.min_size)
