import pytest

from duelcatalog.parsers.fields import (
    CardField,
    field_for_label,
    is_numeric_field,
    parse_leading_int,
)


class TestFieldForLabel:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Civilization", CardField.CIVILIZATION),
            ("Card Type", CardField.TYPE),
            ("English Text", CardField.TEXT),
            ("Mana Cost", CardField.MANA_COST),
            ("Race", CardField.RACE),
            ("Power", CardField.POWER),
            ("Mana Number", CardField.MANA_NUMBER),
            ("Flavor Text", CardField.FLAVOR_TEXT),
        ],
    )
    def test_known_labels(self, label: str, expected: CardField) -> None:
        assert field_for_label(label) is expected

    @pytest.mark.parametrize(
        "label",
        ["Japanese Text", "civilization", "CIVILIZATION", "Mana  Cost", "", "Image"],
    )
    def test_unknown_labels(self, label: str) -> None:
        """Unknown and differently-cased labels have no mapping."""
        assert field_for_label(label) is None

    def test_field_values_use_wire_names(self) -> None:
        assert CardField.MANA_COST.value == "manaCost"
        assert CardField.FLAVOR_TEXT.value == "flavorText"


class TestIsNumericField:
    def test_numeric_fields(self) -> None:
        assert is_numeric_field(CardField.MANA_COST)
        assert is_numeric_field(CardField.POWER)
        assert is_numeric_field(CardField.MANA_NUMBER)

    def test_text_fields(self) -> None:
        numeric = {CardField.MANA_COST, CardField.POWER, CardField.MANA_NUMBER}
        for field in CardField:
            if field not in numeric:
                assert not is_numeric_field(field)


class TestParseLeadingInt:
    def test_plain_number(self) -> None:
        assert parse_leading_int("5") == 5

    def test_trailing_text_ignored(self) -> None:
        assert parse_leading_int("5 mana") == 5
        assert parse_leading_int("6000+") == 6000

    def test_leading_whitespace_skipped(self) -> None:
        assert parse_leading_int("  7") == 7

    def test_signed(self) -> None:
        assert parse_leading_int("-1") == -1
        assert parse_leading_int("+3") == 3

    def test_no_leading_digits_falls_back_to_zero(self) -> None:
        """Values without leading digits give 0, same as an absent row."""
        assert parse_leading_int("no data") == 0
        assert parse_leading_int("∞") == 0
        assert parse_leading_int("") == 0
        assert parse_leading_int("power 5") == 0
