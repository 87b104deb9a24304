"""
Test Suite for the typed Thing accessors

Tests:
1. Each get_*_one / get_*_all pair on well-formed data
2. Exact datatype discrimination
3. Fail-soft handling of absent and malformed values
4. One/All consistency
"""

from datetime import datetime, timezone

import pytest

from solid_thing.rdf.datatypes import XmlSchemaTypes
from solid_thing.rdf.models import BlankNode, Literal, NamedNode, Quad, Thing
from solid_thing.thing.get import (
    get_boolean_all,
    get_boolean_one,
    get_datetime_all,
    get_datetime_one,
    get_decimal_all,
    get_decimal_one,
    get_integer_all,
    get_integer_one,
    get_iri_all,
    get_iri_one,
    get_literal_all,
    get_literal_one,
    get_named_node_all,
    get_named_node_one,
    get_string_in_locale_all,
    get_string_in_locale_one,
    get_string_unlocalized_all,
    get_string_unlocalized_one,
)

SUBJECT = "https://example.org/people#alice"
PREDICATE = "https://example.org/vocab#arbitraryPredicate"
UNUSED_PREDICATE = "https://example.org/vocab#unused"


def make_quad(obj, predicate=PREDICATE):
    return Quad(
        subject=NamedNode(value=SUBJECT),
        predicate=NamedNode(value=predicate),
        object=obj
    )


def literal_quad(value, datatype, language="", predicate=PREDICATE):
    return make_quad(
        Literal(value=value, datatype=NamedNode(value=datatype), language=language),
        predicate
    )


def iri_quad(iri, predicate=PREDICATE):
    return make_quad(NamedNode(value=iri), predicate)


def make_thing(*quads):
    return Thing(list(quads))


# Accessor pairs that read literals of one datatype
SCALAR_ACCESSORS = [
    (get_boolean_one, get_boolean_all, XmlSchemaTypes.boolean, "true", True),
    (get_datetime_one, get_datetime_all, XmlSchemaTypes.dateTime,
     "1990-11-12T13:37:42Z", datetime(1990, 11, 12, 13, 37, 42, tzinfo=timezone.utc)),
    (get_decimal_one, get_decimal_all, XmlSchemaTypes.decimal, "13.37", 13.37),
    (get_integer_one, get_integer_all, XmlSchemaTypes.integer, "42", 42),
    (get_string_unlocalized_one, get_string_unlocalized_all, XmlSchemaTypes.string,
     "Some string", "Some string"),
]


# ============================================================================
# IRIs and raw nodes
# ============================================================================

def test_get_iri_one_and_all():
    """Three IRI statements come back in order; One returns the first"""
    thing = make_thing(
        iri_quad("https://example.org/people#bob"),
        literal_quad("not an IRI", XmlSchemaTypes.string),
        iri_quad("https://example.org/people#carol"),
        iri_quad("https://example.org/people#dave"),
        iri_quad("https://example.org/other", predicate=UNUSED_PREDICATE + "2"),
    )

    assert get_iri_all(thing, PREDICATE) == [
        "https://example.org/people#bob",
        "https://example.org/people#carol",
        "https://example.org/people#dave",
    ]
    assert get_iri_one(thing, PREDICATE) == "https://example.org/people#bob"


def test_get_iri_accepts_named_node_predicate():
    thing = make_thing(iri_quad("https://example.org/people#bob"))

    assert get_iri_one(thing, NamedNode(value=PREDICATE)) == "https://example.org/people#bob"
    assert get_iri_all(thing, NamedNode(value=PREDICATE)) == ["https://example.org/people#bob"]


def test_get_iri_ignores_literals_and_blank_nodes():
    thing = make_thing(
        literal_quad("https://example.org/people#bob", XmlSchemaTypes.string),
        make_quad(BlankNode(value="b0")),
    )

    assert get_iri_one(thing, PREDICATE) is None
    assert get_iri_all(thing, PREDICATE) == []


def test_get_iri_for_unused_predicate():
    thing = make_thing(iri_quad("https://example.org/people#bob"))

    assert get_iri_one(thing, UNUSED_PREDICATE) is None
    assert get_iri_all(thing, UNUSED_PREDICATE) == []


def test_get_named_node_returns_existing_nodes():
    bob = iri_quad("https://example.org/people#bob")
    carol = iri_quad("https://example.org/people#carol")
    thing = [bob, literal_quad("x", XmlSchemaTypes.string), carol]

    assert get_named_node_one(thing, PREDICATE) is bob.object
    nodes = get_named_node_all(thing, PREDICATE)
    assert nodes[0] is bob.object and nodes[1] is carol.object


def test_get_literal_returns_existing_nodes_of_any_datatype():
    integer = literal_quad("42", XmlSchemaTypes.integer)
    greeting = literal_quad("Hello", XmlSchemaTypes.langString, "en")
    thing = [iri_quad("https://example.org/people#bob"), integer, greeting]

    assert get_literal_one(thing, PREDICATE) is integer.object
    assert get_literal_all(thing, PREDICATE) == [integer.object, greeting.object]

    # Metadata the typed accessors hide
    assert get_literal_all(thing, PREDICATE)[1].language == "en"
    assert get_literal_one(thing, PREDICATE).datatype.value == XmlSchemaTypes.integer


def test_escape_hatches_without_match():
    thing = make_thing(literal_quad("42", XmlSchemaTypes.integer))

    assert get_named_node_one(thing, PREDICATE) is None
    assert get_named_node_all(thing, PREDICATE) == []
    assert get_literal_one(thing, UNUSED_PREDICATE) is None
    assert get_literal_all(thing, UNUSED_PREDICATE) == []


# ============================================================================
# Scalar literals
# ============================================================================

@pytest.mark.parametrize("get_one, get_all, datatype, lexical, expected", SCALAR_ACCESSORS)
def test_scalar_round_trip(get_one, get_all, datatype, lexical, expected):
    thing = make_thing(
        iri_quad("https://example.org/people#bob"),
        literal_quad(lexical, datatype),
    )

    assert get_one(thing, PREDICATE) == expected
    assert get_all(thing, PREDICATE) == [expected]


@pytest.mark.parametrize("get_one, get_all, datatype, lexical, expected", SCALAR_ACCESSORS)
def test_scalar_absent(get_one, get_all, datatype, lexical, expected):
    thing = make_thing(literal_quad(lexical, datatype))

    assert get_one(thing, UNUSED_PREDICATE) is None
    assert get_all(thing, UNUSED_PREDICATE) == []
    assert get_one(Thing([]), PREDICATE) is None
    assert get_all(Thing([]), PREDICATE) == []


@pytest.mark.parametrize("get_one, get_all, datatype, lexical, expected", SCALAR_ACCESSORS)
def test_scalar_ignores_other_datatypes(get_one, get_all, datatype, lexical, expected):
    other = XmlSchemaTypes.langString
    thing = make_thing(literal_quad(lexical, other, "en"))

    assert get_one(thing, PREDICATE) is None
    assert get_all(thing, PREDICATE) == []


def test_get_decimal_round_trip():
    thing = make_thing(literal_quad("3.14", XmlSchemaTypes.decimal))
    assert get_decimal_one(thing, PREDICATE) == 3.14


def test_integer_and_decimal_are_not_interchangeable():
    decimal_thing = make_thing(literal_quad("3", XmlSchemaTypes.decimal))
    integer_thing = make_thing(literal_quad("3", XmlSchemaTypes.integer))

    assert get_integer_one(decimal_thing, PREDICATE) is None
    assert get_integer_all(decimal_thing, PREDICATE) == []
    assert get_decimal_one(integer_thing, PREDICATE) is None
    assert get_decimal_all(integer_thing, PREDICATE) == []


def test_get_all_keeps_statement_order():
    thing = make_thing(
        literal_quad("3", XmlSchemaTypes.integer),
        literal_quad("1", XmlSchemaTypes.integer),
        literal_quad("2", XmlSchemaTypes.integer),
        literal_quad("1", XmlSchemaTypes.integer),
    )

    assert get_integer_all(thing, PREDICATE) == [3, 1, 2, 1]
    assert get_integer_one(thing, PREDICATE) == 3


def test_get_string_unlocalized_skips_locale_strings():
    thing = make_thing(
        literal_quad("Hello", XmlSchemaTypes.langString, "en"),
        literal_quad("Plain", XmlSchemaTypes.string),
    )

    assert get_string_unlocalized_one(thing, PREDICATE) == "Plain"
    assert get_string_unlocalized_all(thing, PREDICATE) == ["Plain"]


# ============================================================================
# Malformed values
# ============================================================================

def test_get_boolean_all_drops_malformed_values():
    thing = make_thing(
        literal_quad("true", XmlSchemaTypes.boolean),
        literal_quad("maybe", XmlSchemaTypes.boolean),
    )

    assert get_boolean_all(thing, PREDICATE) == [True]
    assert get_boolean_one(thing, PREDICATE) is True


def test_get_one_does_not_fall_through_past_malformed_first_match():
    """
    A malformed first match makes get_*_one return None even when a later
    statement would deserialize, while get_*_all still returns the valid one.
    """
    thing = make_thing(
        literal_quad("maybe", XmlSchemaTypes.boolean),
        literal_quad("false", XmlSchemaTypes.boolean),
    )

    assert get_boolean_one(thing, PREDICATE) is None
    assert get_boolean_all(thing, PREDICATE) == [False]


@pytest.mark.parametrize("get_one, get_all, datatype, malformed, valid, expected", [
    (get_datetime_one, get_datetime_all, XmlSchemaTypes.dateTime,
     "not a datetime", "1990-11-12", datetime(1990, 11, 12)),
    (get_decimal_one, get_decimal_all, XmlSchemaTypes.decimal, "pi", "3.14", 3.14),
    (get_integer_one, get_integer_all, XmlSchemaTypes.integer, "4.2", "42", 42),
])
def test_malformed_first_match(get_one, get_all, datatype, malformed, valid, expected):
    thing = make_thing(literal_quad(malformed, datatype), literal_quad(valid, datatype))

    assert get_one(thing, PREDICATE) is None
    assert get_all(thing, PREDICATE) == [expected]


def test_get_integer_all_skips_oversized_integers():
    """Integers too long to convert are dropped like any other malformed value"""
    thing = make_thing(
        literal_quad("9" * 5000, XmlSchemaTypes.integer),
        literal_quad("7", XmlSchemaTypes.integer),
    )

    assert get_integer_all(thing, PREDICATE) == [7]
    assert get_integer_one(thing, PREDICATE) is None


def test_get_decimal_all_skips_values_beyond_float_range():
    thing = make_thing(
        literal_quad("9" * 400, XmlSchemaTypes.decimal),
        literal_quad("2.5", XmlSchemaTypes.decimal),
    )

    assert get_decimal_all(thing, PREDICATE) == [2.5]
    assert get_decimal_one(thing, PREDICATE) is None


def test_all_malformed_yields_empty_list():
    thing = make_thing(
        literal_quad("yes", XmlSchemaTypes.boolean),
        literal_quad("no", XmlSchemaTypes.boolean),
    )

    assert get_boolean_one(thing, PREDICATE) is None
    assert get_boolean_all(thing, PREDICATE) == []


def test_false_and_zero_are_found_values():
    thing = make_thing(
        literal_quad("0", XmlSchemaTypes.boolean),
        literal_quad("0", XmlSchemaTypes.integer),
        literal_quad("0.0", XmlSchemaTypes.decimal),
        literal_quad("", XmlSchemaTypes.string),
    )

    assert get_boolean_one(thing, PREDICATE) is False
    assert get_boolean_all(thing, PREDICATE) == [False]
    assert get_integer_all(thing, PREDICATE) == [0]
    assert get_decimal_all(thing, PREDICATE) == [0.0]
    assert get_string_unlocalized_one(thing, PREDICATE) == ""


# ============================================================================
# Localized strings
# ============================================================================

def test_get_string_in_locale_is_case_insensitive():
    thing = make_thing(
        literal_quad("Hello", XmlSchemaTypes.langString, "EN"),
        literal_quad("Hallo", XmlSchemaTypes.langString, "nl"),
        literal_quad("Hi", XmlSchemaTypes.langString, "en"),
    )

    assert get_string_in_locale_one(thing, PREDICATE, "en") == "Hello"
    assert get_string_in_locale_one(thing, PREDICATE, "EN") == "Hello"
    assert get_string_in_locale_all(thing, PREDICATE, "en") == ["Hello", "Hi"]
    assert get_string_in_locale_all(thing, PREDICATE, "En") == ["Hello", "Hi"]
    assert get_string_in_locale_all(thing, PREDICATE, "nl") == ["Hallo"]


def test_get_string_in_locale_without_match():
    thing = make_thing(
        literal_quad("Hello", XmlSchemaTypes.langString, "en"),
        literal_quad("Hello", XmlSchemaTypes.string),
    )

    assert get_string_in_locale_one(thing, PREDICATE, "fr") is None
    assert get_string_in_locale_all(thing, PREDICATE, "fr") == []
    assert get_string_in_locale_one(thing, UNUSED_PREDICATE, "en") is None


# ============================================================================
# One/All consistency
# ============================================================================

MIXED_THING = make_thing(
    iri_quad("https://example.org/people#bob"),
    literal_quad("1", XmlSchemaTypes.boolean),
    literal_quad("2020-06-01T12:00:00+01:00", XmlSchemaTypes.dateTime),
    literal_quad("2.5", XmlSchemaTypes.decimal),
    literal_quad("-12", XmlSchemaTypes.integer),
    literal_quad("plain", XmlSchemaTypes.string),
    literal_quad("Bonjour", XmlSchemaTypes.langString, "fr"),
    iri_quad("https://example.org/people#carol"),
    literal_quad("0", XmlSchemaTypes.boolean),
    literal_quad("7", XmlSchemaTypes.integer),
)


@pytest.mark.parametrize("get_one, get_all", [
    (get_iri_one, get_iri_all),
    (get_boolean_one, get_boolean_all),
    (get_datetime_one, get_datetime_all),
    (get_decimal_one, get_decimal_all),
    (get_integer_one, get_integer_all),
    (get_string_unlocalized_one, get_string_unlocalized_all),
    (get_named_node_one, get_named_node_all),
    (get_literal_one, get_literal_all),
])
@pytest.mark.parametrize("predicate", [PREDICATE, UNUSED_PREDICATE])
def test_one_is_first_of_all(get_one, get_all, predicate):
    one = get_one(MIXED_THING, predicate)
    all_values = get_all(MIXED_THING, predicate)

    if one is None:
        assert all_values == []
    else:
        assert one == all_values[0]


def test_repeated_reads_are_stable():
    first = get_integer_all(MIXED_THING, PREDICATE)
    second = get_integer_all(MIXED_THING, PREDICATE)

    assert first == second == [-12, 7]
    assert len(MIXED_THING) == 10
