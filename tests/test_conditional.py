#
# FmtKit - Conditional Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from fmtkit.conditional import format_if


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatIf:
    @pytest.mark.parametrize(
        "predicate, expected",
        [
            pytest.param(True, " (*)", id="true"),
            pytest.param(False, "", id="false"),
            pytest.param(lambda: True, " (*)", id="callable-true"),
            pytest.param(lambda: False, "", id="callable-false"),
            pytest.param(1, " (*)", id="truthy"),
            pytest.param(0, "", id="falsy"),
        ],
    )
    def test_predicate(self, predicate, expected):
        assert format_if(predicate, " (*)") == expected

    def test_in_sentence(self):
        is_starred = True
        assert f"Cheese Sandwich{format_if(is_starred, ' (*)')}" == "Cheese Sandwich (*)"

    def test_callable_evaluated_once(self):
        calls = []

        def predicate():
            calls.append(1)
            return True

        format_if(predicate, "x")
        assert calls == [1]

    def test_empty_literal(self):
        assert format_if(True, "") == ""

    def test_literal_type(self):
        with pytest.raises(TypeError, match=r"(?i).*literal must be str.*"):
            format_if(True, 5)
