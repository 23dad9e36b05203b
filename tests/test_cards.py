import pytest

from integrator_notes.summary_pipeline.cards import (
    extract_cards,
    extract_friction_cards,
    parse_card,
    split_bold_bullets,
    split_bullets,
)
from integrator_notes.summary_pipeline.core import Card


def test_full_card_with_mentions():
    assert extract_cards("- **T** — B. Mentioned by: X, Y.") == [
        Card(title="T", body="B", mentions="X, Y")
    ]


def test_onboarding_example():
    body = "- **Onboarding friction** — New users drop off early. Mentioned by: Dana, Lee.\n"
    assert extract_cards(body) == [
        Card(title="Onboarding friction", body="New users drop off early", mentions="Dana, Lee")
    ]


@pytest.mark.parametrize("sep", ["—", "--", "-", ":"])
def test_title_separators(sep):
    assert extract_cards(f"- **Title** {sep} Body text.") == [Card("Title", "Body text", "")]


def test_mentions_case_insensitive_and_without_period():
    cards = extract_cards("- **T** — Body. mentioned BY: Ana")
    assert cards == [Card("T", "Body", "Ana")]


def test_only_one_trailing_period_stripped():
    assert extract_cards("- **T** — Wait for it..")[0].body == "Wait for it."


def test_titleless_fallback_and_short_drop():
    body = "- short\n- This bullet has no bold title\n- \n- **T** — ok"
    assert extract_cards(body) == [
        Card(title="", body="This bullet has no bold title", mentions=""),
        Card(title="T", body="ok", mentions=""),
    ]


def test_fallback_boundary_is_strictly_more_than_ten_chars():
    assert parse_card("0123456789") is None
    assert parse_card("0123456789a") == Card(title="", body="0123456789a")


def test_bullet_split_keeps_document_order():
    body = "- **One** — a\n- **Two** — b\n- **Three** — c"
    assert [c.title for c in extract_cards(body)] == ["One", "Two", "Three"]


def test_wrapped_bullet_line_stays_with_its_card():
    cards = extract_cards("- **T** — first line\n  second line.")
    assert cards == [Card("T", "first line\n  second line", "")]


def test_no_bullets_gives_empty_list():
    assert extract_cards("") == []
    assert extract_friction_cards("") == []
    assert extract_cards("tiny") == []


def test_friction_split_only_before_bold_bullets():
    body = (
        "- **Auth scopes** — People confuse read and write\n"
        "- scopes when wiring the API.\n"
        "- **Billing** — Invoices arrive late."
    )
    cards = extract_friction_cards(body)
    assert [c.title for c in cards] == ["Auth scopes", "Billing"]
    assert cards[0].body == "People confuse read and write\n- scopes when wiring the API"
    assert cards[1].body == "Invoices arrive late"


def test_friction_never_populates_mentions():
    cards = extract_friction_cards("- **T** — Body. Mentioned by: X.")
    assert cards[0].mentions == ""
    assert "Mentioned by" in cards[0].body


def test_friction_titleless_fallback():
    cards = extract_friction_cards("Some paragraph without a bold title at all")
    assert cards == [Card(title="", body="Some paragraph without a bold title at all")]


def test_splitters():
    assert split_bullets("- a\n- b") == ["- a", "b"]
    assert split_bold_bullets("- **a**\n- b\n- **c**") == ["- **a**\n- b", "- **c**"]


def test_rejects_non_text():
    with pytest.raises(TypeError):
        extract_cards(42)
