import pytest

from omaha.helpers.cards import (
    Card, card_number, card_to_id, format_cards, id_to_card, make_deck, parse_card_ids
)


def test_card_id_roundtrip():
    cid = card_to_id("As")
    assert cid == 51
    assert str(id_to_card(cid)) == "As"


def test_ten_accepts_both_spellings():
    assert Card.from_str("10h") == Card.from_str("Th")
    assert str(Card.from_str("10h")) == "Th"


def test_card_number_matches_classic_numbering():
    assert card_number(card_to_id("2c")) == 1
    assert card_number(card_to_id("2s")) == 4
    assert card_number(card_to_id("As")) == 52


def test_parse_and_format_cards():
    ids = parse_card_ids("Ah Kd 7c")
    assert ids == (50, 45, 20)
    assert format_cards(ids) == "Ah Kd 7c"
    assert parse_card_ids(["ah", Card.from_str("Kd"), 20]) == ids


def test_bad_cards_rejected():
    with pytest.raises(ValueError):
        Card.from_str("1x")
    with pytest.raises(ValueError):
        card_to_id(52)


def test_make_deck_excludes():
    deck = make_deck(exclude=parse_card_ids("Ah Kd"))
    assert len(deck) == 50
    assert 50 not in deck and 45 not in deck
