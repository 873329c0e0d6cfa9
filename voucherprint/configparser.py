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
Configuration file of the ticket printer. Example::

    [Printer]
    device = /dev/ttyUSB0
    baudrate = 9600
    template = aligned

    [Alignment]
    page_width = 950
    normal_char_width = 12

    [Barcode]
    modules_per_character = 6.2
"""

import configparser
import logging
import os

from voucherprint.exceptions import ConfigError
from voucherprint.translation import voucherprint_gettext

_ = voucherprint_gettext

log = logging.getLogger('voucherprint.config')


class VoucherprintConfig:
    domain = 'voucherprint'

    def __init__(self, filename=None):
        """ filename is the name of the configuration file we're reading,
        relative to the home path, or an absolute path.
        """
        self.filename = filename or (self.domain + '.conf')
        self.config = configparser.ConfigParser()
        self._load_config()

    def get_homepath(self):
        return os.path.join(os.path.expanduser("~"), "." + self.domain)

    def _open_config(self, path):
        filename = os.path.join(path, self.filename)
        if not os.path.exists(filename):
            return False
        self.config.read(filename)
        log.info("Configuration loaded from %s", filename)
        return True

    def _load_config(self):
        # Try to load the configuration file from the home directory first
        # and fall back to the current directory.
        for path in (self.get_homepath(), os.getcwd()):
            if self._open_config(path):
                return
        raise ConfigError(_("Config file not found in: `%s'") % self.filename)

    def get_option(self, name, section='General'):
        if not self.config.has_section(section):
            raise ConfigError(_("Invalid section: %s") % section)
        elif not self.config.has_option(section, name):
            raise ConfigError(_("%s does not have option: %s")
                              % (self.filename, name))
        return self.config.get(section, name)
