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
## Author(s): Stoq Team <stoq-devel@async.com.br>
##
"""
Exceptions raised while composing and printing tickets.
"""


class DriverError(Exception):
    "Base exception for all voucherprint errors"

    def __init__(self, error='', code=-1):
        if code != -1:
            error = '%d: %s' % (code, error)
        Exception.__init__(self, error)
        self.code = code


class TicketError(DriverError):
    """Base exception for composition failures.

    These are local validation failures: they are always raised before a
    single byte of the command stream is handed to the caller, so the
    device never receives a partial ticket.

    The ``kind`` attribute is a transport agnostic name of the failure
    which callers can report back to their clients.
    """
    kind = None


class InvalidAmount(TicketError):
    "The amount is not a finite, non-negative number"
    kind = 'InvalidAmount'


class InvalidBarcodePayload(TicketError):
    "The barcode payload is empty or too long after dropping non-digits"
    kind = 'InvalidBarcodePayload'


class PositionOutOfRange(TicketError):
    "An absolute position does not fit the opcode operands"
    kind = 'PositionOutOfRange'


class UnknownTemplate(TicketError):
    "There is no layout registered for the requested template"
    kind = 'UnknownTemplate'


class CapabilityError(DriverError):
    pass


class ConfigError(DriverError):
    pass


class PrinterOfflineError(DriverError):
    pass


class WriteError(DriverError):
    pass
