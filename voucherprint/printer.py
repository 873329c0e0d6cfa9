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
The ticket printer device.
"""

import logging

from zope.interface import implementer

from voucherprint.alignment import AlignmentParameters
from voucherprint.composer import TicketComposer, get_template_type
from voucherprint.configparser import VoucherprintConfig
from voucherprint.enum import TemplateType
from voucherprint.exceptions import ConfigError, PrinterOfflineError
from voucherprint.interfaces import ITicketPrinter
from voucherprint.serialbase import SerialBase, SerialPort
from voucherprint.translation import voucherprint_gettext

_ = voucherprint_gettext

log = logging.getLogger('voucherprint.printer')


@implementer(ITicketPrinter)
class TicketPrinter(SerialBase):
    """ Prints vouchers on a serial ticket printer.

    The device and the alignment parameters are read from the
    configuration file, values passed to the constructor are used when
    the file does not define them.
    """

    def __init__(self, device=None, port=None, baudrate=9600,
                 config_file=None, params=None,
                 template=TemplateType.PLAIN, check_dsr=False):
        self.device = device
        self.check_dsr = check_dsr
        self.baudrate = baudrate
        self.template = template
        self.params = params
        self._load_configuration(config_file)

        if port is None:
            if not self.device:
                raise ConfigError(_("Device not specified in config or "
                                    "constructor, giving up"))
            port = SerialPort(self.device, int(self.baudrate))
        SerialBase.__init__(self, port)

        self.template = get_template_type(self.template)
        self._composer = TicketComposer(self.params)
        log.info("Printer initialized: device=%s, template=%s",
                 self.device, self.template.value)

    def _load_configuration(self, config_file):
        try:
            config = VoucherprintConfig(config_file)
        except ConfigError as e:
            log.info(e)
            config = None

        if config is not None:
            for field in ['device', 'baudrate', 'template', 'check_dsr']:
                try:
                    setattr(self, field, config.get_option(field, 'Printer'))
                except ConfigError:
                    # Field not found, ignore
                    pass
            if self.params is None:
                self.params = AlignmentParameters.from_config(config)

        # The configuration file only has strings
        self.check_dsr = self.check_dsr in ("True", "true", "1", True)

        if self.params is None:
            self.params = AlignmentParameters()

    #
    #  ITicketPrinter
    #

    def is_connected(self):
        return self.is_ready(self.check_dsr)

    def print_ticket(self, record, template=None):
        if template is None:
            template = self.template
        self._check_connected()
        return self._send(self._composer.compose(record, template))

    def print_diagnostic(self):
        self._check_connected()
        return self._send(self._composer.compose_diagnostic())

    #
    #  Private
    #

    def _check_connected(self):
        if not self.is_connected():
            raise PrinterOfflineError(_("Printer not connected"))

    def _send(self, data):
        # A single write, a failed ticket is not retried
        self.write(data)
        log.info("Ticket sent, %d bytes", len(data))
        return data
