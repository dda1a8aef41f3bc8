"""Unit tests for row and header formatting."""
import unittest

from ds_log.core.formatting import banner, format_elapsed, format_row, header_lines


class TestFormatElapsed(unittest.TestCase):
    def test_minutes_seconds_and_tenth(self):
        self.assertEqual(format_elapsed(125_340), '02:05.3')

    def test_zero(self):
        self.assertEqual(format_elapsed(0), '00:00.0')

    def test_first_millisecond_digit_is_not_rounded(self):
        self.assertEqual(format_elapsed(1_999), '00:01.9')
        self.assertEqual(format_elapsed(1_034), '00:01.3')
        self.assertEqual(format_elapsed(1_005), '00:01.5')

    def test_minutes_wrap_at_one_hour(self):
        self.assertEqual(format_elapsed(3_661_000), '01:01.0')


class TestFormatRow(unittest.TestCase):
    def test_fixed_width_columns(self):
        row = format_row('00:01.2', 'DEBUG', 'hi')
        self.assertEqual(row, '00:01.2' + ' ' * 7 + ' ' + 'DEBUG' + ' ' * 8 + ' ' + 'hi' + ' ' * 10 + '\n')

    def test_long_values_are_not_truncated(self):
        message = 'x' * 40
        row = format_row('00:00.0', 'CRITICAL', message)
        self.assertTrue(row.endswith(message + '\n'))
        self.assertEqual(row[15:29], 'CRITICAL      ')


class TestHeaderLines(unittest.TestCase):
    def test_header_layout(self):
        lines = header_lines(
            title='Start of log',
            created='Mar 05 2016 - 14:07:09 PM',
            system='Linux',
            app_name='QDriverStation',
            app_version='1.2.3',
        )
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[0], '-' * 72)
        self.assertEqual(lines[1], 'START OF LOG')
        self.assertEqual(lines[2], banner())
        self.assertEqual(lines[3], '')
        self.assertEqual(lines[4], 'Log created on:      Mar 05 2016 - 14:07:09 PM')
        self.assertEqual(lines[5], 'Operating System:    Linux')
        self.assertEqual(lines[6], 'Application name:    QDriverStation')
        self.assertEqual(lines[7], 'Application version: 1.2.3')
        self.assertEqual(lines[9], banner())
        self.assertEqual(lines[10], 'ELAPSED TIME   ERROR LEVEL   MESSAGE     ')
        self.assertEqual(lines[11], banner())


if __name__ == '__main__':
    unittest.main()
