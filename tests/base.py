import os
import unittest

from zope.interface import implementer

from voucherprint.interfaces import ISerialPort


# The directory where tests data will be stored
DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@implementer(ISerialPort)
class PlaybackPort:
    """ A port that checks that everything written to it matches the
    bytes recorded in a data file.

    Each line of the file starts with W and is followed by the escaped
    bytes, as in repr().
    """

    def __init__(self, datafile):
        self._input = b''
        self._datafile = datafile
        self.writes = 0
        self._load_data(datafile)

    def setDTR(self, value=True):
        pass

    def getDSR(self):
        return True

    def write(self, bytes_):
        n_bytes = len(bytes_)
        data = self._input[:n_bytes]
        self._input = self._input[n_bytes:]
        self.writes += 1

        if bytes_ != data:
            raise ValueError("Written data differs from the expected:\n"
                             "FILE:     %s\n"
                             "EXPECTED: %r\n"
                             "GOT:      %r\n" % (self._datafile, data, bytes_))

    def is_done(self):
        return not self._input

    def _convert_data(self, data):
        data = data.replace(b'\\n', b'\n')
        data = data.replace(b'\\r', b'\r')
        data = data.replace(b'\\t', b'\t')
        data = data.replace(b'\\\\', b'\\')
        data = data.split(b'\\x')
        if len(data) == 1:
            return data[0]

        n = data[0]
        for p in data[1:]:
            n += bytes([int(p[:2], 16)]) + p[2:]
        return n

    def _load_data(self, datafile):
        with open(datafile, "rb") as fd:
            for n, line in enumerate(fd.readlines()):
                data = self._convert_data(line[2:].rstrip(b'\n'))
                if line.startswith(b"W"):
                    self._input += data
                else:
                    raise TypeError("Unrecognized entry type at %s:%d: %r"
                                    % (datafile, n + 1, line[:1]))


class OfflinePort(PlaybackPort):
    is_open = False

    def __init__(self):
        self._input = b''
        self.writes = 0

    def getDSR(self):
        return False


class _BaseTest(unittest.TestCase):
    """ Replays the data file named after the test method:
    tests/data/<prefix>-<test-name>.txt
    """
    prefix = None

    def setUp(self):
        self._port = PlaybackPort(self._get_data_filename())

    def _get_data_filename(self):
        test_name = self._testMethodName
        if test_name.startswith('test_'):
            test_name = test_name[5:]
        test_name = test_name.replace('_', '-')
        return os.path.join(DATA_DIR, "%s-%s.txt" % (self.prefix, test_name))
