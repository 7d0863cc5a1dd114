from __future__ import annotations

from hypothesis import given, strategies as st

from foliogen.content import DELIMITER, LABELS, parse_fields, parse_front_matter

from conftest import make_document

# --- Strategies ---


def field_value():
    return st.text(
        alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\r\n"),
    ).filter(lambda value: DELIMITER not in value and not any(label in value for label in LABELS))


def body_text():
    return st.text(alphabet=st.characters(blacklist_categories=("Cs",))).filter(lambda value: DELIMITER not in value)


# --- Tests ---


@given(st.text())
def test_parse_fields_accepts_any_block(block):
    fields = parse_fields(block)
    assert set(fields) == set(LABELS)


@given(field_value(), field_value(), field_value(), body_text())
def test_extraction_round_trip(title, date, description, body):
    parsed_body, meta = parse_front_matter(make_document(title, date, description, body=body))

    assert parsed_body == body
    assert (meta.title, meta.date, meta.description) == (title, date, description)
