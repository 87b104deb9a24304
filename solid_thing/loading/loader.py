from pathlib import Path
from typing import Dict, List, Optional

from rdflib import BNode, Dataset, URIRef
from rdflib import Literal as RdfLiteral
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

from ..rdf.datatypes import XmlSchemaTypes
from ..rdf.models import BlankNode, DefaultGraph, Literal, NamedNode, Quad


class DatasetParseError(Exception):
    """Serialized RDF could not be parsed"""


class DatasetLoader:
    """Load RDF datasets into quads"""

    FORMATS = ("turtle", "nt", "nquads", "trig", "json-ld")

    SUFFIX_FORMATS = {
        ".ttl": "turtle",
        ".nt": "nt",
        ".nq": "nquads",
        ".trig": "trig",
        ".jsonld": "json-ld",
        ".json": "json-ld",
    }

    def __init__(self, default_format: str = "turtle"):
        self.default_format = default_format
        self.datasets: Dict[str, List[Quad]] = {}

    def load_from_file(
        self,
        file_path: str | Path,
        format: Optional[str] = None
    ) -> List[Quad]:
        """Load dataset from an RDF file, guessing the format from its suffix"""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Dataset file not found: {file_path}")

        if format is None:
            format = self.SUFFIX_FORMATS.get(file_path.suffix.lower(), self.default_format)

        print(f"Loading dataset from {file_path} ({format})")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = f.read()

        return self.load_from_string(data, format=format, name=file_path.stem)

    def load_from_string(
        self,
        data: str,
        format: Optional[str] = None,
        name: str = "default"
    ) -> List[Quad]:
        """Parse serialized RDF and store the resulting quads under `name`"""
        format = format or self.default_format
        if format not in self.FORMATS:
            raise ValueError(
                f"Unsupported RDF format: {format} (expected one of {', '.join(self.FORMATS)})"
            )

        dataset = Dataset()
        try:
            dataset.parse(data=data, format=format)
        except Exception as e:
            raise DatasetParseError(f"Failed to parse {format} data: {e}") from e

        # Triples outside a named graph land under either of these
        default_graphs = {
            DATASET_DEFAULT_GRAPH_ID,
            dataset.default_graph.identifier,
        }

        quads = []
        skipped = 0
        for s, p, o, g in dataset.quads((None, None, None, None)):
            quad = self._to_quad(s, p, o, g, default_graphs)
            if quad is None:
                skipped += 1
                continue
            quads.append(quad)

        if skipped:
            print(f"Warning: skipped {skipped} statements with unsupported terms")

        self.datasets[name] = quads
        print(f"Loaded dataset '{name}': {len(quads)} quads")

        return quads

    def get_dataset(self, name: str) -> Optional[List[Quad]]:
        """Get loaded dataset by name"""
        return self.datasets.get(name)

    def get_all_datasets(self) -> Dict[str, List[Quad]]:
        """Get all loaded datasets"""
        return self.datasets.copy()

    @classmethod
    def _to_quad(cls, s, p, o, g, default_graphs) -> Optional[Quad]:
        subject = cls._to_term(s)
        predicate = cls._to_term(p)
        obj = cls._to_term(o)

        if not isinstance(subject, (NamedNode, BlankNode)):
            return None
        if not isinstance(predicate, NamedNode) or obj is None:
            return None

        return Quad(
            subject=subject,
            predicate=predicate,
            object=obj,
            graph=cls._to_graph(g, default_graphs)
        )

    @staticmethod
    def _to_term(term):
        """Map an rdflib term onto the node model; None if it has no counterpart"""
        if isinstance(term, URIRef):
            return NamedNode(value=str(term))
        if isinstance(term, BNode):
            return BlankNode(value=str(term))
        if isinstance(term, RdfLiteral):
            if term.language:
                return Literal(
                    value=str(term),
                    datatype=NamedNode(value=XmlSchemaTypes.langString),
                    language=term.language
                )
            datatype = str(term.datatype) if term.datatype else XmlSchemaTypes.string
            return Literal(value=str(term), datatype=NamedNode(value=datatype))
        return None

    @staticmethod
    def _to_graph(graph, default_graphs):
        # Depending on the rdflib version the context comes as a Graph or its identifier
        identifier = getattr(graph, "identifier", graph)
        if identifier is None or identifier in default_graphs:
            return DefaultGraph()
        if isinstance(identifier, BNode):
            return BlankNode(value=str(identifier))
        return NamedNode(value=str(identifier))
