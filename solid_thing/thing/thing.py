from typing import Dict, Iterable, List, Union

from ..rdf.datatypes import Iri, IriString, as_named_node
from ..rdf.models import Quad, Thing


def get_thing_one(dataset: Iterable[Quad], subject: Union[Iri, IriString]) -> Thing:
    """
    Collect the quads describing one subject.

    Args:
        dataset: Quads of a whole resource, possibly many subjects
        subject: Subject IRI of the Thing

    Returns:
        Thing with the matching quads in dataset order (empty if none match)
    """
    subject_iri = as_named_node(subject).value
    return Thing([
        quad for quad in dataset
        if quad.subject.term_type == "NamedNode" and quad.subject.value == subject_iri
    ])


def get_thing_all(dataset: Iterable[Quad]) -> List[Thing]:
    """One Thing per subject (IRI or blank node), in first-seen order"""
    grouped: Dict[tuple, List[Quad]] = {}
    for quad in dataset:
        key = (quad.subject.term_type, quad.subject.value)
        grouped.setdefault(key, []).append(quad)
    return [Thing(quads) for quads in grouped.values()]
