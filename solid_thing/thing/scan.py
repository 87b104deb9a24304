from typing import Iterable, List, Optional

from ..rdf.models import Quad
from .matchers import Matcher


def find_one(thing: Iterable[Quad], matcher: Matcher) -> Optional[Quad]:
    """
    Args:
        thing: Quads to scan, in iteration order
        matcher: Selects the quads to include

    Returns:
        First quad in `thing` accepted by `matcher`, or None
    """
    for quad in thing:
        if matcher(quad):
            return quad
    return None


def find_all(thing: Iterable[Quad], matcher: Matcher) -> List[Quad]:
    """
    Args:
        thing: Quads to scan, in iteration order
        matcher: Selects the quads to include

    Returns:
        Every quad in `thing` accepted by `matcher`, in their original order
    """
    return [quad for quad in thing if matcher(quad)]
