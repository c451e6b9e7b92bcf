#
# FmtKit - Delegates Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import datetime
import math
from decimal import Decimal
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from fmtkit.delegates import DATE_STYLES, TIME_STYLES, date_format, format_date, format_number


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatNumber:
    @pytest.mark.parametrize(
        "number, formatter, expected",
        [
            pytest.param(math.pi, ".2f", "3.14", id="float-spec"),
            pytest.param(math.pi, "010.4f", "00003.1416", id="zero-padded"),
            pytest.param(5, "05d", "00005", id="int-spec"),
            pytest.param(1234567, ",d", "1,234,567", id="grouping"),
            pytest.param(Decimal("2.50"), ".1f", "2.5", id="decimal"),
            pytest.param(0.25, ".0%", "25%", id="percent"),
        ],
    )
    def test_format_spec(self, number, formatter, expected):
        assert format_number(number, formatter) == expected

    def test_callable(self):
        assert format_number(Fraction(1, 3), lambda x: f"{x.numerator}/{x.denominator}") == "1/3"

    @pytest.mark.parametrize(
        "number, formatter, expected",
        [
            pytest.param(3.5, "d", "Unformattable<3.5>", id="bad-spec"),
            pytest.param(7, lambda x: None, "Unformattable<7>", id="callable-none"),
            pytest.param(7, lambda x: int("x"), "Unformattable<7>", id="callable-raises"),
            pytest.param(7, lambda x: 7, "Unformattable<7>", id="callable-not-str"),
        ],
    )
    def test_unformattable(self, number, formatter, expected):
        assert format_number(number, formatter) == expected

    @pytest.mark.parametrize("number", [True, "3", None], ids=["bool", "str", "none"])
    def test_not_a_number(self, number):
        with pytest.raises(TypeError, match=r"(?i).*number must be.*"):
            format_number(number, "d")

    def test_formatter_type(self):
        with pytest.raises(TypeError, match=r"(?i).*formatter must be str or callable.*"):
            format_number(1, 5)


class TestFormatDate:
    DAY = datetime.date(2024, 3, 1)
    MOMENT = datetime.datetime(2024, 3, 1, 14, 5, 9)

    @pytest.mark.parametrize(
        "value, formatter, expected",
        [
            pytest.param(DAY, "%Y-%m-%d", "2024-03-01", id="date-pattern"),
            pytest.param(MOMENT, "%H:%M", "14:05", id="datetime-pattern"),
            pytest.param(datetime.time(9, 30), "%H:%M", "09:30", id="time-pattern"),
            pytest.param(DAY, lambda d: d.isoformat(), "2024-03-01", id="callable"),
        ],
    )
    def test_format(self, value, formatter, expected):
        assert format_date(value, formatter) == expected

    def test_styles(self):
        assert format_date(self.DAY, date_format("medium")) == "Mar 01, 2024"
        assert format_date(self.DAY, date_format("long")) == "March 01, 2024"
        assert format_date(self.MOMENT, date_format("none", "medium")) == "14:05:09"

    def test_unformattable(self):
        assert format_date(self.DAY, lambda d: None) == "Unformattable<2024-03-01>"

    def test_not_a_date(self):
        with pytest.raises(TypeError, match=r"(?i).*value must be datetime.*"):
            format_date("2024-03-01", "%Y")


class TestDateFormat:
    def test_default(self):
        assert date_format() == "%b %d, %Y"

    def test_combined(self):
        assert date_format("full", "short") == "%A, %B %d, %Y, %H:%M"

    def test_none_none(self):
        assert date_format("none", "none") == ""

    def test_known_styles(self):
        assert set(DATE_STYLES) == set(TIME_STYLES) == {"none", "short", "medium", "long", "full"}

    @pytest.mark.parametrize(
        "date, time",
        [
            pytest.param("tiny", "none", id="date"),
            pytest.param("short", "tiny", id="time"),
        ],
    )
    def test_unknown_style(self, date, time):
        with pytest.raises(ValueError, match=r"(?i).*style expected one of.*"):
            date_format(date, time)
