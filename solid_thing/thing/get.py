"""
Typed read access to the values of a Thing.

Every accessor comes in two flavours:
- get_*_one: value of the first matching statement, or None
- get_*_all: values of every matching statement, in statement order

A `_one` accessor only looks at the first statement matching the predicate
and datatype. If that statement's lexical form is malformed it returns None,
even when a later statement would deserialize. The `_all` accessors drop
malformed entries instead.
"""

from datetime import datetime
from typing import Callable, Iterable, List, Optional, TypeVar, Union

from ..rdf.datatypes import (
    Iri,
    IriString,
    XmlSchemaTypes,
    deserialize_boolean,
    deserialize_datetime,
    deserialize_decimal,
    deserialize_integer,
)
from ..rdf.models import Literal, NamedNode, Quad
from .matchers import (
    get_literal_matcher,
    get_literal_of_type_matcher,
    get_locale_string_matcher,
    get_named_node_matcher,
)
from .scan import find_all, find_one

T = TypeVar("T")

Predicate = Union[Iri, IriString]
ThingLike = Iterable[Quad]


def get_iri_one(thing: ThingLike, predicate: Predicate) -> Optional[IriString]:
    """
    Args:
        thing: The Thing to read an IRI value from
        predicate: The Predicate for which you want the IRI value

    Returns:
        An IRI value for the given Predicate, if present, or None otherwise
    """
    named_node = get_named_node_one(thing, predicate)
    if named_node is None:
        return None
    return named_node.value


def get_iri_all(thing: ThingLike, predicate: Predicate) -> List[IriString]:
    """IRI values for the given Predicate"""
    return [node.value for node in get_named_node_all(thing, predicate)]


def get_boolean_one(thing: ThingLike, predicate: Predicate) -> Optional[bool]:
    """
    Args:
        thing: The Thing to read a boolean value from
        predicate: The Predicate for which you want the boolean value

    Returns:
        A boolean value for the given Predicate, if present, or None otherwise
    """
    return _get_deserialized_one(
        thing, predicate, XmlSchemaTypes.boolean, deserialize_boolean
    )


def get_boolean_all(thing: ThingLike, predicate: Predicate) -> List[bool]:
    """Boolean values for the given Predicate; malformed ones are skipped"""
    return _get_deserialized_all(
        thing, predicate, XmlSchemaTypes.boolean, deserialize_boolean
    )


def get_datetime_one(thing: ThingLike, predicate: Predicate) -> Optional[datetime]:
    """
    Args:
        thing: The Thing to read a datetime value from
        predicate: The Predicate for which you want the datetime value

    Returns:
        A datetime value for the given Predicate, if present, or None otherwise
    """
    return _get_deserialized_one(
        thing, predicate, XmlSchemaTypes.dateTime, deserialize_datetime
    )


def get_datetime_all(thing: ThingLike, predicate: Predicate) -> List[datetime]:
    """Datetime values for the given Predicate; malformed ones are skipped"""
    return _get_deserialized_all(
        thing, predicate, XmlSchemaTypes.dateTime, deserialize_datetime
    )


def get_decimal_one(thing: ThingLike, predicate: Predicate) -> Optional[float]:
    """
    Args:
        thing: The Thing to read a decimal value from
        predicate: The Predicate for which you want the decimal value

    Returns:
        A decimal value for the given Predicate, if present, or None otherwise
    """
    return _get_deserialized_one(
        thing, predicate, XmlSchemaTypes.decimal, deserialize_decimal
    )


def get_decimal_all(thing: ThingLike, predicate: Predicate) -> List[float]:
    """Decimal values for the given Predicate; malformed ones are skipped"""
    return _get_deserialized_all(
        thing, predicate, XmlSchemaTypes.decimal, deserialize_decimal
    )


def get_integer_one(thing: ThingLike, predicate: Predicate) -> Optional[int]:
    """
    Args:
        thing: The Thing to read an integer value from
        predicate: The Predicate for which you want the integer value

    Returns:
        An integer value for the given Predicate, if present, or None otherwise
    """
    return _get_deserialized_one(
        thing, predicate, XmlSchemaTypes.integer, deserialize_integer
    )


def get_integer_all(thing: ThingLike, predicate: Predicate) -> List[int]:
    """Integer values for the given Predicate; malformed ones are skipped"""
    return _get_deserialized_all(
        thing, predicate, XmlSchemaTypes.integer, deserialize_integer
    )


def get_string_in_locale_one(
    thing: ThingLike,
    predicate: Predicate,
    locale: str
) -> Optional[str]:
    """
    Args:
        thing: The Thing to read a localised string value from
        predicate: The Predicate for which you want the localised string value
        locale: The desired locale, compared case-insensitively

    Returns:
        A localised string value for the given Predicate, if present in
        `locale`, or None otherwise
    """
    matching_quad = find_one(thing, get_locale_string_matcher(predicate, locale))
    if matching_quad is None:
        return None
    return matching_quad.object.value


def get_string_in_locale_all(
    thing: ThingLike,
    predicate: Predicate,
    locale: str
) -> List[str]:
    """Localised string values for the given Predicate in `locale`"""
    matching_quads = find_all(thing, get_locale_string_matcher(predicate, locale))
    return [quad.object.value for quad in matching_quads]


def get_string_unlocalized_one(
    thing: ThingLike,
    predicate: Predicate
) -> Optional[str]:
    """
    Args:
        thing: The Thing to read a string value from
        predicate: The Predicate for which you want the string value

    Returns:
        An xsd:string value for the given Predicate, if present, or None otherwise
    """
    return _get_literal_one_of_type(thing, predicate, XmlSchemaTypes.string)


def get_string_unlocalized_all(thing: ThingLike, predicate: Predicate) -> List[str]:
    """xsd:string values for the given Predicate"""
    return _get_literal_all_of_type(thing, predicate, XmlSchemaTypes.string)


def get_named_node_one(thing: ThingLike, predicate: Predicate) -> Optional[NamedNode]:
    """
    Raw NamedNode for the given Predicate, if present, or None otherwise.

    Prefer get_iri_one(); this is meant for callers needing the node itself.
    """
    matching_quad = find_one(thing, get_named_node_matcher(predicate))
    if matching_quad is None:
        return None
    return matching_quad.object


def get_named_node_all(thing: ThingLike, predicate: Predicate) -> List[NamedNode]:
    """Raw NamedNodes for the given Predicate"""
    matching_quads = find_all(thing, get_named_node_matcher(predicate))
    return [quad.object for quad in matching_quads]


def get_literal_one(thing: ThingLike, predicate: Predicate) -> Optional[Literal]:
    """
    Raw Literal (any datatype) for the given Predicate, if present, or None.

    Use it to read datatype or language metadata the typed accessors hide.
    """
    matching_quad = find_one(thing, get_literal_matcher(predicate))
    if matching_quad is None:
        return None
    return matching_quad.object


def get_literal_all(thing: ThingLike, predicate: Predicate) -> List[Literal]:
    """Raw Literals (any datatype) for the given Predicate"""
    matching_quads = find_all(thing, get_literal_matcher(predicate))
    return [quad.object for quad in matching_quads]


# ================== Helpers ==================

def _get_literal_one_of_type(
    thing: ThingLike,
    predicate: Predicate,
    datatype: IriString
) -> Optional[str]:
    """Lexical value of the first literal of `datatype`, or None"""
    matching_quad = find_one(thing, get_literal_of_type_matcher(predicate, datatype))
    if matching_quad is None:
        return None
    return matching_quad.object.value


def _get_literal_all_of_type(
    thing: ThingLike,
    predicate: Predicate,
    datatype: IriString
) -> List[str]:
    """Lexical values of every literal of `datatype`"""
    matching_quads = find_all(thing, get_literal_of_type_matcher(predicate, datatype))
    return [quad.object.value for quad in matching_quads]


def _get_deserialized_one(
    thing: ThingLike,
    predicate: Predicate,
    datatype: IriString,
    deserialize: Callable[[str], Optional[T]]
) -> Optional[T]:
    literal_string = _get_literal_one_of_type(thing, predicate, datatype)
    if literal_string is None:
        return None
    return deserialize(literal_string)


def _get_deserialized_all(
    thing: ThingLike,
    predicate: Predicate,
    datatype: IriString,
    deserialize: Callable[[str], Optional[T]]
) -> List[T]:
    values = []
    for literal_string in _get_literal_all_of_type(thing, predicate, datatype):
        value = deserialize(literal_string)
        if value is not None:
            values.append(value)
    return values
