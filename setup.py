#!/usr/bin/env python

# Setup file for Voucherprint

from setuptools import find_packages, setup

from voucherprint import __version__


with open('requirements.txt') as f:
    install_requires = [l.strip() for l in f.readlines() if
                        l.strip() and not l.startswith('#')]

setup(
    name="voucherprint",
    version=".".join(map(str, __version__)),
    author="Stoq Team",
    author_email="stoq-devel@async.com.br",
    description="Python voucher ticket printer driver",
    long_description=("This package composes cash out vouchers into the "
                      "command stream of ESC/POS like ticket printers, "
                      "with barcodes, computed alignment and amounts "
                      "spelled in words, and sends them through a serial "
                      "port."),
    url="http://www.stoq.com.br",
    license="GNU GPL 2 (see COPYING)",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',
)
