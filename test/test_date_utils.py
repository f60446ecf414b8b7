import unittest
from datetime import date

from showtimes.date_utils import MONTHS, parse_date
from showtimes.models import DateParseError, InvalidDateError, MalformedDateError


class TestParseDate(unittest.TestCase):
    def test_parse_date(self):
        self.assertEqual(parse_date("Saturday, February 15, 2025"), date(2025, 2, 15))
        self.assertEqual(parse_date("Monday, January 6, 2025"), date(2025, 1, 6))
        self.assertEqual(parse_date("Wednesday, December 31, 2025"), date(2025, 12, 31))

    def test_header_whitespace(self):
        self.assertEqual(parse_date("\nSaturday, February 15, 2025\n"), date(2025, 2, 15))
        self.assertEqual(parse_date("Saturday,  February 15 , 2025"), date(2025, 2, 15))

    def test_blank_header_means_no_date(self):
        self.assertIsNone(parse_date("\n"))
        self.assertIsNone(parse_date(""))
        self.assertIsNone(parse_date("  \t "))

    def test_invalid_calendar_dates(self):
        for text in [
            "Sunday, February 30, 2025",
            "Saturday, February 29, 2025",
            "Monday, April 31, 2025",
            "Monday, April 0, 2025",
        ]:
            with self.assertRaises(InvalidDateError):
                parse_date(text)

    def test_leap_day(self):
        self.assertEqual(parse_date("Thursday, February 29, 2024"), date(2024, 2, 29))

    def test_malformed_headers(self):
        for text in [
            "February 15, 2025",
            "Saturday, February 15, 2025, 7PM",
            "Saturday February 15 2025",
            "Saturday, February, 2025",
            "Saturday, February 15 16, 2025",
            "Saturday, february 15, 2025",
            "Saturday, Feb 15, 2025",
            "Saturday, February fifteenth, 2025",
            "Saturday, February 15, next year",
            "Saturday, February 1_5, 2025",
            "Saturday, February 15, 2_025",
            "Saturday, February \u0661\u0665, 2025",
            "Saturday, February +5, 2025",
            "This week at the Ottobar",
        ]:
            with self.assertRaises(MalformedDateError, msg=text):
                parse_date(text)

    def test_errors_are_distinguishable(self):
        with self.assertRaises(DateParseError) as malformed:
            parse_date("Saturday, Febtember 15, 2025")
        with self.assertRaises(DateParseError) as invalid:
            parse_date("Sunday, February 30, 2025")
        self.assertNotIsInstance(malformed.exception, InvalidDateError)
        self.assertNotIsInstance(invalid.exception, MalformedDateError)
        self.assertIsInstance(invalid.exception, ValueError)

    def test_months(self):
        self.assertEqual(len(MONTHS), 12)
        self.assertEqual(MONTHS[0], "January")
        self.assertEqual(MONTHS[11], "December")


if __name__ == "__main__":
    unittest.main()
