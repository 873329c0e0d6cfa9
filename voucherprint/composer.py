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
Composition of tickets into printer command streams.

Every ticket shares the same envelope::

    reset, orientation, field, field, ..., form feed

and each field is written as::

    [alignment] position x, position y, [font], text or barcode, line feed

The layouts only decide which fields are printed and where.
"""

import logging
from typing import NamedTuple, Optional

from voucherprint.alignment import AlignmentParameters
from voucherprint.enum import Alignment, TemplateType
from voucherprint.escpos import (Font, LINE_FEED, barcode_block, form_feed,
                                 position_x, position_y, reset,
                                 select_alignment, select_font,
                                 select_orientation)
from voucherprint.exceptions import UnknownTemplate
from voucherprint.interfaces import ILayoutTemplate
from voucherprint.translation import voucherprint_gettext
from voucherprint.utils import encode_text, get_obj_from_module

_ = voucherprint_gettext

log = logging.getLogger('voucherprint.composer')


class TextField(NamedTuple):
    text: str
    x: int
    y: int
    #: None keeps the font selected by a previous field
    font: Optional[Font] = None
    #: None does not send a justification command
    justify: Optional[Alignment] = None


class BarcodeField(NamedTuple):
    payload: str
    x: int
    y: int
    justify: Optional[Alignment] = None


_LAYOUTS = {
    TemplateType.PLAIN: ('voucherprint.templates.plain', 'PlainLayout'),
    TemplateType.DETAILED: ('voucherprint.templates.detailed', 'DetailedLayout'),
    TemplateType.ALIGNED: ('voucherprint.templates.aligned', 'AlignedLayout'),
    TemplateType.DIAGNOSTIC: ('voucherprint.templates.diagnostic',
                              'DiagnosticLayout'),
}


def get_template_type(template):
    """Converts template, a TemplateType or its value, to a TemplateType

    :raises: UnknownTemplate if there is no such template
    """
    if isinstance(template, TemplateType):
        return template
    try:
        return TemplateType(template)
    except ValueError:
        raise UnknownTemplate(_("Unknown ticket template: %r") % (template, ))


def get_layout(template):
    """Returns the layout that implements template"""
    template = get_template_type(template)
    module_name, class_name = _LAYOUTS[template]
    layout = get_obj_from_module(module_name, obj_name=class_name)()
    if not ILayoutTemplate.providedBy(layout):
        raise TypeError("The layout `%r' doesn't implement ILayoutTemplate"
                        % layout)
    return layout


def get_supported_templates():
    return list(_LAYOUTS)


class TicketComposer:
    """ Builds the command stream of a ticket.

    A composer holds nothing but the alignment parameters of the device,
    so the same instance can be shared by concurrent requests.
    """

    def __init__(self, params=None):
        self.params = params or AlignmentParameters()
        self.params.check()

    def compose(self, record, template=TemplateType.PLAIN):
        """ Returns the commands that print record with a template.

        Nothing is returned if any of the fields is invalid, the errors
        are raised before the stream is complete.

        :param record: a VoucherRecord, may be None for the diagnostic
          template
        :param template: a TemplateType or its value
        :returns: the command stream
        :rtype: bytes
        """
        layout = get_layout(template)
        if record is None and layout.needs_record:
            raise ValueError("The %s template needs a voucher"
                             % (layout.name.value, ))

        commands = [reset(), select_orientation(layout.landscape)]
        for field in layout.get_fields(record, self.params):
            commands.append(self._compose_field(field))
        commands.append(form_feed())

        data = b''.join(commands)
        log.info("Composed %s ticket, %d bytes", layout.name.value, len(data))
        return data

    def compose_diagnostic(self):
        return self.compose(None, TemplateType.DIAGNOSTIC)

    #
    #  Private
    #

    def _compose_field(self, field):
        commands = []
        if field.justify is not None:
            commands.append(select_alignment(field.justify))
        commands.append(position_x(field.x))
        commands.append(position_y(field.y))

        if isinstance(field, BarcodeField):
            commands.append(barcode_block(
                field.payload,
                height=self.params.barcode_height,
                module_width=self.params.barcode_module_width,
                max_length=self.params.max_barcode_length))
        elif isinstance(field, TextField):
            if field.font is not None:
                commands.append(select_font(*field.font))
            commands.append(encode_text(field.text))
        else:
            raise TypeError("Unknown field %r" % (field, ))

        commands.append(LINE_FEED)
        return b''.join(commands)
