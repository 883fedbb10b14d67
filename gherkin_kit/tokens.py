"""Token types, grammar rule types and source locations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from gherkin_kit.gherkin_line import GherkinLine, Span


@dataclass(frozen=True)
class Location:
    """A position in a source file; lines and columns count from 1."""

    line: int
    column: int


class RuleType(IntEnum):
    """Terminal and non-terminal symbols of the Gherkin grammar."""

    NONE = 0
    EOF = 1
    EMPTY = 2
    COMMENT = 3
    TAG_LINE = 4
    FEATURE_LINE = 5
    RULE_LINE = 6
    BACKGROUND_LINE = 7
    SCENARIO_LINE = 8
    EXAMPLES_LINE = 9
    STEP_LINE = 10
    DOC_STRING_SEPARATOR = 11
    TABLE_ROW = 12
    LANGUAGE = 13
    OTHER = 14
    GHERKIN_DOCUMENT = 15
    FEATURE = 16
    FEATURE_HEADER = 17
    RULE = 18
    RULE_HEADER = 19
    BACKGROUND = 20
    SCENARIO_DEFINITION = 21
    SCENARIO = 22
    EXAMPLES_DEFINITION = 23
    EXAMPLES = 24
    EXAMPLES_TABLE = 25
    STEP = 26
    STEP_ARG = 27
    DATA_TABLE = 28
    DOC_STRING = 29
    TAGS = 30
    DESCRIPTION_HELPER = 31
    DESCRIPTION = 32
    COUNT = 33


class TokenType(IntEnum):
    """The kinds of line a token matcher can recognise."""

    NONE = RuleType.NONE
    EMPTY = RuleType.EMPTY
    FEATURE_LINE = RuleType.FEATURE_LINE
    RULE_LINE = RuleType.RULE_LINE
    SCENARIO_LINE = RuleType.SCENARIO_LINE
    EXAMPLES_LINE = RuleType.EXAMPLES_LINE
    BACKGROUND_LINE = RuleType.BACKGROUND_LINE
    STEP_LINE = RuleType.STEP_LINE
    TABLE_ROW = RuleType.TABLE_ROW
    TAG_LINE = RuleType.TAG_LINE
    LANGUAGE = RuleType.LANGUAGE
    COMMENT = RuleType.COMMENT
    DOC_STRING_SEPARATOR = RuleType.DOC_STRING_SEPARATOR
    OTHER = RuleType.OTHER
    EOF = RuleType.EOF


@dataclass
class Token:
    """One scanned line, plus whatever a matcher found in it.

    A token without a line marks the end of the input.
    """

    line: Optional["GherkinLine"]
    location: Location
    matched_type: TokenType = TokenType.NONE
    matched_text: Optional[str] = None
    matched_keyword: Optional[str] = None
    matched_items: list["Span"] = field(default_factory=list)
    matched_language: Optional[str] = None

    def is_eof(self) -> bool:
        """True when this token stands for the end of the input."""
        return self.line is None