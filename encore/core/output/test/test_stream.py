import unittest
import os
import tempfile
from encore.core.output import stream

class TestStream(unittest.TestCase):
    def test_stream_string_write_string(self):
        s = stream.String()
        s.write('abc')
        s.write('xyz')
        self.assertEqual(s.buffer, 'abc\nxyz\n')

    def test_stream_string_write_raw(self):
        s = stream.String()
        s.write_raw('\rab')
        s.write_raw('c')
        self.assertEqual(s.buffer, '\rabc')

    def test_stream_std_to_file(self):
        with tempfile.TemporaryDirectory() as directory:
            file_name = os.path.join(directory, 'stream_test_tmp_file.txt')
            f = open(file_name, 'w')
            s = stream.Std(f)
            s.write('abc')
            s.write_raw('xyz')
            f.close()
            f = open(file_name)
            self.assertEqual(f.read(), 'abc\nxyz')
            f.close()
