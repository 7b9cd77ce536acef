import pytest
from durak.common.errors import InvariantViolation
from durak.common.table import Table, TableSlot


def test_empty_table(card):
    table = Table()
    assert table.is_empty()
    assert table.is_closed()
    assert table.open_attack() is None
    assert table.cards() == []
    assert str(table) == "(empty)"


def test_attack_and_cover(card):
    table = Table()
    table.add_attack(card("6H"))
    assert table.open_attack() == card("6H")
    assert not table.is_closed()

    table.cover(card("8H"))
    assert table.is_closed()
    assert table.slots == (TableSlot(card("6H"), card("8H")),)
    assert table.ranks() == {card("6H").rank, card("8H").rank}
    assert str(table) == "6 of ♥ / 8 of ♥"


def test_cannot_attack_over_open_slot(card):
    table = Table()
    table.add_attack(card("6H"))
    with pytest.raises(InvariantViolation):
        table.add_attack(card("6D"))


def test_cannot_cover_closed_table(card):
    table = Table()
    with pytest.raises(InvariantViolation):
        table.cover(card("6H"))


def test_capacity(card):
    table = Table(capacity=2)
    for attack, defense in (("6H", "7H"), ("6D", "7D")):
        table.add_attack(card(attack))
        table.cover(card(defense))
    assert table.is_full()
    with pytest.raises(InvariantViolation, match="table is full"):
        table.add_attack(card("7C"))


def test_clear_returns_cards_in_play_order(card):
    table = Table()
    table.add_attack(card("6H"))
    table.cover(card("8H"))
    table.add_attack(card("8C"))
    assert table.clear() == [card("6H"), card("8H"), card("8C")]
    assert table.is_empty()


def test_slot_is_immutable(card):
    slot = TableSlot(card("6H"))
    assert not slot.is_defended()
    assert slot.cards() == [card("6H")]
    with pytest.raises(AttributeError):
        slot.defense = card("7H")
