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
Functions for general use.
"""

from importlib import import_module
import re
import unicodedata

_CONTROL_CHARS = re.compile('[\x00-\x1f\x7f]')
_NON_DIGITS = re.compile(r'[^0-9]')


def encode_text(text, encoding='ascii'):
    """ Converts the string 'text' to bytes in the encoding 'encoding',
    dropping control characters so that literal text can never be read by
    the printer as a command.

    @param text:       text to convert
    @type text:        str
    @param encoding:   encoding to use
    @type encoding:    str
    @returns:          converted text
    @rtype:            bytes
    """
    if isinstance(text, bytes):
        text = text.decode(encoding, 'ignore')
    text = str(text)
    if encoding == "ascii":
        # Decompose accented characters so that at least the base letter
        # survives the encoding below ("Año" -> "Ano")
        text = unicodedata.normalize("NFKD", text)
    text = _CONTROL_CHARS.sub('', text)
    return text.encode(encoding, "ignore")


def only_digits(text):
    """Remove everything that is not an ASCII digit from text"""
    return _NON_DIGITS.sub('', str(text))


def get_obj_from_module(module_name, obj_name):
    module = import_module(module_name)
    try:
        return getattr(module, obj_name)
    except AttributeError:
        raise ImportError("Can't find %s in module %s" % (obj_name, module_name))
