from pydantic import BaseModel, Field, RootModel
from typing import Annotated, Iterator, List, Literal as Exactly, Optional, Union


class NamedNode(BaseModel):
    """IRI reference"""
    term_type: Exactly["NamedNode"] = "NamedNode"
    value: str = Field(..., description="The referenced IRI")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"<{self.value}>"


class Literal(BaseModel):
    """RDF literal (lexical value + datatype, language only for rdf:langString)"""
    term_type: Exactly["Literal"] = "Literal"
    value: str = Field(..., description="Lexical form")
    datatype: NamedNode = Field(..., description="Datatype IRI")
    language: str = Field(default="", description="Language tag, empty if none")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        if self.language:
            return f'"{self.value}"@{self.language}'
        return f'"{self.value}"^^{self.datatype}'


class BlankNode(BaseModel):
    """Blank node, never matched by the accessors"""
    term_type: Exactly["BlankNode"] = "BlankNode"
    value: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"_:{self.value}"


class DefaultGraph(BaseModel):
    term_type: Exactly["DefaultGraph"] = "DefaultGraph"
    value: Exactly[""] = ""

    model_config = {"frozen": True}


Term = Annotated[
    Union[NamedNode, Literal, BlankNode, DefaultGraph],
    Field(discriminator="term_type"),
]


class Quad(BaseModel):
    """RDF quad (subject-predicate-object-graph)"""
    subject: Union[NamedNode, BlankNode] = Field(..., alias="s")
    predicate: NamedNode = Field(..., alias="p")
    object: Term = Field(..., alias="o")
    graph: Union[NamedNode, BlankNode, DefaultGraph] = Field(
        default_factory=DefaultGraph, alias="g"
    )

    model_config = {"populate_by_name": True, "frozen": True}

    def __str__(self) -> str:
        if isinstance(self.graph, DefaultGraph):
            return f"{self.subject} {self.predicate} {self.object} ."
        return f"{self.subject} {self.predicate} {self.object} {self.graph} ."


class Thing(RootModel[List[Quad]]):
    """
    Ordered collection of quads sharing a subject.

    Iteration order is the construction order; nothing is deduplicated.
    """
    root: List[Quad] = Field(default_factory=list)

    model_config = {"frozen": True}

    def __iter__(self) -> Iterator[Quad]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Quad:
        return self.root[index]

    @property
    def subject(self) -> Optional[str]:
        """Subject IRI of the first quad; None when empty or blank-node subject"""
        if not self.root or self.root[0].subject.term_type != "NamedNode":
            return None
        return self.root[0].subject.value
