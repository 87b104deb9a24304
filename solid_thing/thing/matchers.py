from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..rdf.datatypes import (
    Iri,
    IriString,
    as_named_node,
    is_literal,
    is_locale_string,
    is_named_node,
)
from ..rdf.models import NamedNode, Quad


class MatcherKind(Enum):
    """Which object nodes a matcher accepts"""
    NAMED_NODE = "named_node"
    LITERAL = "literal"
    LITERAL_OF_TYPE = "literal_of_type"
    LOCALE_STRING = "locale_string"


@dataclass(frozen=True)
class Matcher:
    """
    Selects the quads relevant to one accessor call.

    A plain value: two matchers built from the same arguments compare equal,
    and evaluating one never changes it.
    """
    predicate: NamedNode
    kind: MatcherKind
    datatype: Optional[str] = None
    locale: Optional[str] = None

    def __call__(self, quad: Quad) -> bool:
        return matches(self, quad)


def matches(matcher: Matcher, quad: Quad) -> bool:
    """Does `quad` satisfy `matcher`?"""
    if quad.predicate.value != matcher.predicate.value:
        return False

    term = quad.object

    if matcher.kind is MatcherKind.NAMED_NODE:
        return is_named_node(term)

    if not is_literal(term):
        return False

    if matcher.kind is MatcherKind.LITERAL:
        return True
    if matcher.kind is MatcherKind.LITERAL_OF_TYPE:
        return term.datatype.value == matcher.datatype

    # Locale strings: case-folded tag comparison, no subtag normalization
    return is_locale_string(term) and term.language.lower() == matcher.locale.lower()


def get_named_node_matcher(predicate: Union[Iri, IriString]) -> Matcher:
    return Matcher(as_named_node(predicate), MatcherKind.NAMED_NODE)


def get_literal_matcher(predicate: Union[Iri, IriString]) -> Matcher:
    return Matcher(as_named_node(predicate), MatcherKind.LITERAL)


def get_literal_of_type_matcher(
    predicate: Union[Iri, IriString],
    datatype: IriString
) -> Matcher:
    return Matcher(
        as_named_node(predicate),
        MatcherKind.LITERAL_OF_TYPE,
        datatype=datatype
    )


def get_locale_string_matcher(
    predicate: Union[Iri, IriString],
    locale: str
) -> Matcher:
    return Matcher(
        as_named_node(predicate),
        MatcherKind.LOCALE_STRING,
        locale=locale
    )
