"""
Unit tests for serial protocol parser

Tests protocol.py ASCII message parsing
"""

import unittest
from motionlab.serial.protocol import ProtocolParser, LineEnding


class TestProtocolParser(unittest.TestCase):
    """Test protocol parser"""

    def setUp(self):
        """Set up test fixtures"""
        self.parser = ProtocolParser()
        self.messages = []
        self.parser.on_raw_data = self.messages.append

    def test_parse_raw_message_lf(self):
        """Test parsing Raw: message with LF ending"""
        self.parser.set_line_ending(LineEnding.LF)
        self.parser.parse_bytes(b"Raw:100,200,300,10,20,30,50,60,70\n")

        self.assertEqual(len(self.messages), 1)
        raw = self.messages[0]
        self.assertEqual(len(raw), 9)
        self.assertEqual(raw[0], 100)  # ax
        self.assertEqual(raw[1], 200)  # ay
        self.assertEqual(raw[2], 300)  # az
        self.assertEqual(raw[6], 50)   # mx

    def test_parse_six_field_message(self):
        """Test accel+gyro only lines are accepted"""
        self.parser.parse_bytes(b"Raw:1,2,3,4,5,6\n")

        self.assertEqual(len(self.messages), 1)
        self.assertEqual(list(self.messages[0]), [1, 2, 3, 4, 5, 6])

    def test_parse_raw_message_crlf(self):
        """Test parsing Raw: message with CRLF ending"""
        self.parser.set_line_ending(LineEnding.CRLF)
        self.parser.parse_bytes(b"Raw:100,200,300,10,20,30,50,60,70\r\n")

        self.assertEqual(len(self.messages), 1)
        self.assertEqual(len(self.messages[0]), 9)

    def test_parse_raw_message_cr(self):
        """Test parsing Raw: message with CR ending"""
        self.parser.set_line_ending(LineEnding.CR)
        self.parser.parse_bytes(b"Raw:1,2,3,4,5,6\r")

        self.assertEqual(len(self.messages), 1)

    def test_no_line_ending_splits_on_prefix(self):
        """Test unterminated stream emits a message when the next one starts"""
        self.parser.set_line_ending(LineEnding.NONE)
        self.parser.parse_bytes(b"Raw:1,2,3,4,5,6Raw:7,8,9,10,11,12")

        self.assertEqual(len(self.messages), 1)
        self.assertEqual(list(self.messages[0]), [1, 2, 3, 4, 5, 6])

    def test_message_split_across_reads(self):
        """Test a line delivered in two chunks"""
        self.parser.parse_bytes(b"Raw:10,20,")
        self.assertEqual(self.messages, [])
        self.parser.parse_bytes(b"30,40,50,60\n")

        self.assertEqual(len(self.messages), 1)
        self.assertEqual(self.messages[0][5], 60)

    def test_values_clamped_to_int16(self):
        """Test out-of-range counts are clamped"""
        self.parser.parse_bytes(b"Raw:40000,-40000,0,0,0,0\n")

        self.assertEqual(self.messages[0][0], 32767)
        self.assertEqual(self.messages[0][1], -32768)

    def test_malformed_lines_ignored(self):
        """Test wrong field counts, non-numeric values and other prefixes"""
        self.parser.parse_bytes(
            b"Raw:1,2,3\n"
            b"Raw:a,b,c,d,e,f\n"
            b"Cal1:0.0,0.0,0.0,0.0,0.0,0.0,1.5,2.5,3.5,50.0\n"
            b"hello\n"
            b"\xff\xfe\n"
        )

        self.assertEqual(self.messages, [])

    def test_parse_multiple_messages(self):
        """Test parsing several lines in one read"""
        self.parser.parse_bytes(
            b"Raw:1,2,3,4,5,6\n"
            b"Raw:7,8,9,10,11,12,13,14,15\n"
        )

        self.assertEqual(len(self.messages), 2)
        self.assertEqual(self.messages[1][0], 7)

    def test_reset_discards_partial_line(self):
        """Test reset clears the pending buffer"""
        self.parser.parse_bytes(b"Raw:1,2,")
        self.parser.reset()
        self.parser.parse_bytes(b"3,4,5,6\n")

        self.assertEqual(self.messages, [])


if __name__ == '__main__':
    unittest.main()
