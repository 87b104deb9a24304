"""
XML Schema datatypes, node classification and lexical deserializers.

Every deserializer is total: a lexical form outside the datatype's grammar
yields None instead of raising.
"""

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union

from .models import Literal, NamedNode


class XmlSchemaTypes:
    """Datatype IRIs the accessors know how to read"""
    boolean = "http://www.w3.org/2001/XMLSchema#boolean"
    dateTime = "http://www.w3.org/2001/XMLSchema#dateTime"
    decimal = "http://www.w3.org/2001/XMLSchema#decimal"
    integer = "http://www.w3.org/2001/XMLSchema#integer"
    string = "http://www.w3.org/2001/XMLSchema#string"
    langString = "http://www.w3.org/1999/02/22-rdf-syntax-ns#langString"


xml_schema_types = XmlSchemaTypes()

IriString = str
Iri = NamedNode


# ================== Predicate canonicalizer ==================

def as_named_node(iri: Union[Iri, IriString]) -> NamedNode:
    """Turn a raw IRI string into a NamedNode; NamedNodes pass through."""
    if isinstance(iri, NamedNode):
        return iri
    return NamedNode(value=iri)


# ================== Node classifier ==================

def is_named_node(term: Any) -> bool:
    return isinstance(term, NamedNode)


def is_literal(term: Any) -> bool:
    return isinstance(term, Literal)


def is_locale_string(term: Any) -> bool:
    """Literal typed rdf:langString"""
    return is_literal(term) and term.datatype.value == XmlSchemaTypes.langString


# ================== Deserializers ==================

_BOOLEANS = {"true": True, "1": True, "false": False, "0": False}

_DECIMAL = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DATETIME = re.compile(
    r"(?P<year>-?\d{4,})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})?",
    re.ASCII,
)


def deserialize_boolean(literal_string: str) -> Optional[bool]:
    return _BOOLEANS.get(literal_string)


def deserialize_decimal(literal_string: str) -> Optional[float]:
    if not _DECIMAL.fullmatch(literal_string):
        return None
    result = float(literal_string)
    # Beyond the float range the grammar still matches but the value is lost
    if not math.isfinite(result):
        return None
    return result


def deserialize_integer(literal_string: str) -> Optional[int]:
    if not _INTEGER.fullmatch(literal_string):
        return None
    try:
        return int(literal_string)
    except ValueError:
        # Longer than the interpreter allows for str -> int conversion
        return None


def deserialize_datetime(literal_string: str) -> Optional[datetime]:
    """
    Parse an xsd:dateTime (or bare date) lexical form.

    Returns an aware datetime when an offset is given, a naive one otherwise.
    """
    match = _DATETIME.fullmatch(literal_string)
    if match is None:
        return None

    parts = match.groupdict()
    tzinfo = _parse_offset(parts["offset"])
    if parts["offset"] and tzinfo is None:
        return None

    hour = int(parts["hour"] or 0)
    minute = int(parts["minute"] or 0)
    second = int(parts["second"] or 0)
    # Only the first six fraction digits fit a datetime
    microsecond = int((parts["fraction"] or "").ljust(6, "0")[:6])

    rollover = hour == 24
    if rollover:
        if minute or second or microsecond:
            return None
        hour = 0

    try:
        result = datetime(
            int(parts["year"]),
            int(parts["month"]),
            int(parts["day"]),
            hour,
            minute,
            second,
            microsecond,
            tzinfo=tzinfo,
        )
        if rollover:
            result += timedelta(days=1)
    except (ValueError, OverflowError):
        return None

    return result


def _parse_offset(offset: Optional[str]) -> Optional[timezone]:
    if not offset:
        return None
    if offset == "Z":
        return timezone.utc

    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if hours > 14 or minutes > 59 or (hours == 14 and minutes):
        return None

    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if offset[0] == "-" else delta)
