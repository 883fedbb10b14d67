"""The abstract syntax tree of a parsed Gherkin document."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional, Union

from gherkin_kit.tokens import Location


class AstType(IntEnum):
    """The kinds of node found in a Gherkin syntax tree."""

    GHERKIN_DOCUMENT = 0
    FEATURE = 1
    RULE = 2
    BACKGROUND = 3
    SCENARIO = 4
    EXAMPLES = 5
    STEP = 6
    DATA_TABLE = 7
    DOC_STRING = 8
    TABLE_ROW = 9
    TABLE_CELL = 10
    TAG = 11
    COMMENT = 12


@dataclass
class Tag:
    """A tag such as '@wip' attached to a feature, rule, scenario or examples."""

    type: ClassVar[AstType] = AstType.TAG

    location: Location
    name: str


@dataclass
class Comment:
    """A comment line, kept with its full text."""

    type: ClassVar[AstType] = AstType.COMMENT

    location: Location
    text: str


@dataclass
class TableCell:
    """One cell of a table row, with escapes already resolved."""

    type: ClassVar[AstType] = AstType.TABLE_CELL

    location: Location
    value: str


@dataclass
class TableRow:
    """A row of a data table or an examples table."""

    type: ClassVar[AstType] = AstType.TABLE_ROW

    location: Location
    cells: list[TableCell] = field(default_factory=list)


@dataclass
class DataTable:
    """A table given as the argument of a step."""

    type: ClassVar[AstType] = AstType.DATA_TABLE

    location: Location
    rows: list[TableRow] = field(default_factory=list)


@dataclass
class DocString:
    """A block of free text given as the argument of a step."""

    type: ClassVar[AstType] = AstType.DOC_STRING

    location: Location
    delimiter: str
    content_type: Optional[str] = None
    content: str = ""


StepArgument = Union[DataTable, DocString]


@dataclass
class Step:
    """A Given/When/Then line with an optional table or doc string."""

    type: ClassVar[AstType] = AstType.STEP

    location: Location
    keyword: str
    text: str
    argument: Optional[StepArgument] = None


@dataclass
class Background:
    """Steps run before every scenario of a feature or rule."""

    type: ClassVar[AstType] = AstType.BACKGROUND

    location: Location
    keyword: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    steps: list[Step] = field(default_factory=list)


@dataclass
class ExampleTable:
    """An 'Examples' section: a header row and the rows of values under it."""

    type: ClassVar[AstType] = AstType.EXAMPLES

    location: Location
    keyword: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    tags: list[Tag] = field(default_factory=list)
    table_header: Optional[TableRow] = None
    table_body: list[TableRow] = field(default_factory=list)


@dataclass
class Scenario:
    """A scenario or scenario outline with its steps and examples."""

    type: ClassVar[AstType] = AstType.SCENARIO

    location: Location
    keyword: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    tags: list[Tag] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    examples: list[ExampleTable] = field(default_factory=list)


@dataclass
class Rule:
    """A rule grouping a background and scenarios inside a feature."""

    type: ClassVar[AstType] = AstType.RULE

    location: Location
    keyword: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    children: list[Union[Background, Scenario]] = field(default_factory=list)


@dataclass
class Feature:
    """The feature at the top of a document, with its children in source order."""

    type: ClassVar[AstType] = AstType.FEATURE

    location: Location
    language: Optional[str] = None
    keyword: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    tags: list[Tag] = field(default_factory=list)
    children: list[Union[Background, Scenario, Rule]] = field(default_factory=list)


@dataclass
class GherkinDocument:
    """A whole parsed document: its feature, if any, and all its comments."""

    type: ClassVar[AstType] = AstType.GHERKIN_DOCUMENT

    feature: Optional[Feature] = None
    comments: list[Comment] = field(default_factory=list)
    uri: Optional[str] = None

    def set_uri(self, uri: Union[str, bytes, None]) -> None:
        """Record where the document came from; a missing uri changes nothing."""
        if uri:
            self.uri = uri.decode("utf-8") if isinstance(uri, bytes) else uri