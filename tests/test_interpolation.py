#
# FmtKit - Interpolation Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import datetime

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from fmtkit.integers import IntegerFormatConfig
from fmtkit.interpolation import (
    ConditionalField,
    DateField,
    DefaultField,
    IntegerField,
    Interpolation,
    NumberField,
    OptionalField,
    TextField,
    format_field,
    interpolate,
)
from fmtkit.optionals import OptionalFormatConfig
from fmtkit.padding import PaddingConfig
from fmtkit.radix import Radix


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatField:
    @pytest.mark.parametrize(
        "field, expected",
        [
            pytest.param(IntegerField(15, IntegerFormatConfig.byte(Radix.HEX, uses_prefix=True)), "0x0F",
                         id="integer"),
            pytest.param(IntegerField(42), "42", id="integer-default"),
            pytest.param(TextField(23, PaddingConfig(width=5)), "   23", id="text"),
            pytest.param(TextField(23, PaddingConfig.left(), width=4), "23  ", id="text-width-override"),
            pytest.param(OptionalField(None, OptionalFormatConfig.descriptive()), "Optional(nil)", id="optional"),
            pytest.param(OptionalField(23), "23", id="optional-default"),
            pytest.param(DefaultField(None, "n/a"), "n/a", id="default-absent"),
            pytest.param(DefaultField(1, "n/a"), "1", id="default-present"),
            pytest.param(ConditionalField(True, " (*)"), " (*)", id="conditional-true"),
            pytest.param(ConditionalField(lambda: False, " (*)"), "", id="conditional-callable"),
            pytest.param(NumberField(2.5, ".2f"), "2.50", id="number"),
            pytest.param(DateField(datetime.date(2024, 3, 1), "%d/%m/%Y"), "01/03/2024", id="date"),
        ],
    )
    def test_dispatch(self, field, expected):
        assert format_field(field) == expected

    @pytest.mark.parametrize("field", ["text", 42, None], ids=["str", "int", "none"])
    def test_not_a_field(self, field):
        with pytest.raises(TypeError, match=r"(?i).*field record expected.*"):
            format_field(field)

    def test_fields_are_values(self):
        assert IntegerField(1) == IntegerField(1, IntegerFormatConfig())
        assert OptionalField(None) != OptionalField(0)


class TestInterpolate:
    def test_mixed_parts(self):
        text = interpolate(
            "Reg ", IntegerField(10, IntegerFormatConfig.byte("hex", uses_prefix=True)),
            " = ", TextField("on", PaddingConfig.left(4)), "|",
        )
        assert text == "Reg 0x0A = on  |"

    def test_optional_sentence(self):
        """Mirror the three optional styles in a sentence."""
        value1, value2 = 23, None
        for config, expected in [
            (OptionalFormatConfig.system_default(), "There's Optional(23) and nil"),
            (OptionalFormatConfig.descriptive(), "There's Optional(23) and Optional(nil)"),
            (OptionalFormatConfig.stripped(), "There's 23 and nil"),
        ]:
            text = interpolate("There's ", OptionalField(value1, config), " and ", OptionalField(value2, config))
            assert text == expected

    def test_plain_values_described(self):
        assert interpolate("x=", 42, ", y=", 2.5, ", z=", None) == "x=42, y=2.5, z=None"

    def test_class_value(self):
        class Sandwich:
            def describe(self) -> str:
                return "Cheese Sandwich"

        assert interpolate("type=", Sandwich) == f"type={Sandwich}"
        assert interpolate("item=", Sandwich()) == "item=Cheese Sandwich"

    def test_empty(self):
        assert interpolate() == ""


class TestInterpolation:
    def test_builder(self):
        line = Interpolation()
        line.append_literal("Cheese Sandwich").append(ConditionalField(True, " (*)"))
        assert str(line) == "Cheese Sandwich (*)"
        assert line.render() == "Cheese Sandwich (*)"

    def test_incremental(self):
        line = Interpolation().append_literal("a")
        assert str(line) == "a"
        line.append(IntegerField(5, IntegerFormatConfig.binary(width=4)))
        assert str(line) == "a0101"

    def test_repr(self):
        assert repr(Interpolation().append_literal("hi")) == "Interpolation('hi')"

    def test_literal_type(self):
        with pytest.raises(TypeError, match=r"(?i).*literal must be str.*"):
            Interpolation().append_literal(3)
