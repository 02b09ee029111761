import pytest

from daily_roster.sheets.columns import a1_range, column_label_to_number, column_number_to_label


@pytest.mark.parametrize(
    ("number", "label"),
    [(1, "A"), (2, "B"), (26, "Z"), (27, "AA"), (52, "AZ"), (53, "BA"), (702, "ZZ"), (703, "AAA")],
)
def test_number_to_label(number, label):
    assert column_number_to_label(number) == label
    assert column_label_to_number(label) == number


@pytest.mark.parametrize("number", [0, -1, -30])
def test_non_positive_number_has_no_label(number):
    assert column_number_to_label(number) == ""


def test_label_is_case_insensitive():
    assert column_label_to_number("ab") == 28


def test_invalid_label():
    with pytest.raises(ValueError):
        column_label_to_number("A1")


def test_a1_range():
    assert a1_range("JUN", 10, 4, 11, 4) == "JUN!J4:K4"
    assert a1_range("JUN", 26, 7, 27, 7) == "JUN!Z7:AA7"
