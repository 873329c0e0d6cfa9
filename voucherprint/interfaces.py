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
Voucherprint interfaces specification
"""

from zope.interface import Attribute, Interface

__all__ = ["ISerialPort",
           "ILayoutTemplate",
           "ITicketPrinter"]


class ISerialPort(Interface):
    """ Interface used by the ticket printer to talk to the device
    """

    def getDSR():
        """ Returns True if the device is ready """

    def setDTR(value):
        """ Tell the device the host is ready """

    def write(data):
        """ Write bytes to the device """


class ILayoutTemplate(Interface):
    """ Describes where each piece of a voucher goes on the page
    """

    name = Attribute("The TemplateType of the layout")
    landscape = Attribute("If the page is printed in landscape orientation")
    needs_record = Attribute("If the layout prints data from a voucher")

    def get_fields(record, params):
        """ Returns the ordered list of fields to be printed.

        @param record:    the voucher being printed, may be None when
                          needs_record is False
        @type record:     VoucherRecord
        @param params:    the alignment parameters of the device
        @type params:     AlignmentParameters
        @returns:         a list of TextField and BarcodeField
        """


class ITicketPrinter(Interface):
    """ A device able to print vouchers
    """

    def is_connected():
        """ Returns True if the printer can receive a ticket """

    def print_ticket(record, template):
        """ Composes the ticket for record and sends it to the printer.

        A single write is attempted, errors are not retried.

        @param record:    the voucher to print
        @type record:     VoucherRecord
        @param template:  the layout used
        @type template:   TemplateType
        @returns:         the bytes sent to the device
        """

    def print_diagnostic():
        """ Prints the calibration ticket """
