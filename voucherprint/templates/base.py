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
Generic base class implementation for all layouts
"""

from zope.interface import implementer

from voucherprint.interfaces import ILayoutTemplate

THANK_YOU = "---- THANK YOU ----"


@implementer(ILayoutTemplate)
class BaseLayout:
    # Subclasses must define this
    name = None

    landscape = True
    needs_record = True

    def get_fields(self, record, params):
        raise NotImplementedError

    #
    #  Helpers for the voucher layouts
    #

    def get_valid_date_text(self, record):
        return "Valid Date: %s" % (record.valid_date, )

    def get_amount_text(self, record):
        return "Amount: %sPHP" % (record.get_amount_display(), )

    def get_ticket_text(self, record):
        return "Ticket #%s  Time: %s" % (record.ticket_no, record.time)

    def get_asset_text(self, record):
        """The asset/floor line, None when the voucher has neither"""
        parts = []
        if record.asset_no:
            parts.append("Asset #%s" % (record.asset_no, ))
        if record.floor:
            parts.append("Floor: %s" % (record.floor, ))
        if not parts:
            return None
        return "  ".join(parts)
