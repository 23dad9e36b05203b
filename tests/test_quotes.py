import pytest

from integrator_notes.summary_pipeline.core import Quote
from integrator_notes.summary_pipeline.quotes import extract_quotes, split_attribution


def test_name_and_org():
    assert extract_quotes('> "Ship weekly." — Dana, Acme Corp\n') == [
        Quote(text="Ship weekly.", attribution="Dana", org="Acme Corp")
    ]


@pytest.mark.parametrize("sep", ["—", "--", "-"])
def test_separator_variants(sep):
    qs = extract_quotes(f'> "Q" {sep} Name, Org')
    assert qs == [Quote(text="Q", attribution="Name", org="Org")]


def test_person_only():
    assert extract_quotes('>"Just me" - Lee') == [Quote("Just me", "Lee", "")]


def test_team_suffix_keeps_full_attribution():
    assert split_attribution("Platform team") == ("Platform team", "Platform")
    assert split_attribution("Growth Team Member") == ("Growth Team Member", "Growth")


def test_comma_split_overrides_team_suffix():
    assert split_attribution("Dana, Platform team") == ("Dana", "Platform team")


def test_comma_splits_on_first_comma_only():
    assert split_attribution("Dana, VP, Acme") == ("Dana", "VP, Acme")


def test_malformed_line_is_skipped_and_later_quotes_survive():
    body = (
        '> "Missing the closing mark — Lee\n'
        '> "Still parsed." — Sam, Initech\n'
        'plain text line\n'
        '> "No separator" Dana\n'
        '> "Also parsed." -- Kim\n'
    )
    assert extract_quotes(body) == [
        Quote("Still parsed.", "Sam", "Initech"),
        Quote("Also parsed.", "Kim", ""),
    ]


def test_no_matches_gives_empty_list():
    assert extract_quotes("") == []
    assert extract_quotes("no quotes here\n- **T** — B") == []


def test_indented_blockquote():
    assert extract_quotes('   > "Indented" — Ana') == [Quote("Indented", "Ana", "")]


def test_nested_blockquote_markers():
    md = '>> "Nested" — Ana, Beta\n> > "Spaced" — Bo\n'
    assert extract_quotes(md) == [Quote("Nested", "Ana", "Beta"), Quote("Spaced", "Bo", "")]
