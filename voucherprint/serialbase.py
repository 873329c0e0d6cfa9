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
## Author(s):   Johan Dahlin     <jdahlin@async.com.br>
##              Henrique Romano  <henrique@async.com.br>
##

import logging

from serial import Serial, SerialException, EIGHTBITS, PARITY_NONE, STOPBITS_ONE
from zope.interface import implementer

from voucherprint.interfaces import ISerialPort
from voucherprint.exceptions import WriteError
from voucherprint.translation import voucherprint_gettext

_ = voucherprint_gettext

log = logging.getLogger('voucherprint.serial')


@implementer(ISerialPort)
class VirtualPort:
    """A port that accepts everything, for printing without a device"""

    def __init__(self):
        self.data = b''

    def getDSR(self):
        return True

    def setDTR(self, value):
        pass

    def write(self, data):
        self.data += data


@implementer(ISerialPort)
class SerialPort(Serial):

    def __init__(self, device, baudrate=9600):
        # The ticket printers only work with 8N1, do not make this
        # configurable.
        Serial.__init__(self, device, baudrate=baudrate, bytesize=EIGHTBITS,
                        parity=PARITY_NONE, stopbits=STOPBITS_ONE, timeout=3,
                        write_timeout=3)
        self.setDTR(True)
        self.reset_input_buffer()
        self.reset_output_buffer()


class SerialBase(object):

    def __init__(self, port):
        self._port = port

    def is_ready(self, check_dsr=False):
        """ Returns True if the port is open. Many printers never assert
        DSR, so it is only checked when check_dsr is set.
        """
        if self._port is None:
            return False
        if not getattr(self._port, 'is_open', True):
            return False
        if check_dsr:
            return bool(self._port.getDSR())
        return True

    def write(self, data):
        log.debug(">>> %r (%d bytes)" % (data, len(data)))
        try:
            self._port.write(data)
        except (SerialException, OSError) as e:
            raise WriteError(_("Could not write to the printer: %s") % (e, ))

    def close(self):
        if getattr(self._port, 'is_open', False):
            # Pending output is lost if the port is closed before a flush
            self._port.flush()
            self._port.close()
