# gherkin-kit

Building blocks for reading Gherkin `.feature` files. The package uses only the standard library.

## Modules

- `gherkin_kit.tokens` defines the values a scanner produces.
  - `Location` is a frozen `(line, column)` pair.
  - `RuleType` lists the grammar's terminal and non-terminal symbols.
  - `TokenType` lists the kinds of line.
  - `Token` holds a `GherkinLine` (or `None` at end of input), a `Location` and the `matched_*` fields. `Token.is_eof()` is true when there is no line.
- `gherkin_kit.gherkin_line` provides `GherkinLine(line_text, line_number)`, which measures the leading spaces and tabs (`indent`, `trimmed_line`). It offers these methods:
  - `start_with(prefix)` and `start_with_title_keyword(keyword)`. The second requires `keyword` followed directly by `:`.
  - `is_empty()`.
  - `rest_trimmed(length)` returns the text after `length` characters, with spaces stripped.
  - `line_text_without_indent(indent_to_remove)` removes up to that much indentation. If the value is negative or larger than the line's indent, it removes all of it.
  - `table_cells()` returns the cells between unescaped `|` as `Span(column, text)` values with 1-based columns. `\n` becomes a newline, and `\|` and `\\` become `|` and `\`. Any other escape is kept as written.
  - `tags()` returns each `@tag` as a `Span`. A tag runs to the next `@` and has trailing spaces removed.
  - `is_language_line()` recognises `# language:` headers. `language()` returns the word after the first colon, or `''` if there is no colon.
- `gherkin_kit.item_queue` provides `ItemQueue`, a FIFO queue with these methods:
  - `add` appends to the back and `push` puts an item at the front.
  - `remove`, `pop` and `peek` return `None` when the queue is empty.
  - `extend(other)` moves all of `other`'s items to the back of this queue.
  - It also supports `len()` and iteration.
- `gherkin_kit.ast` holds the document tree as dataclasses:
  - `GherkinDocument`, `Feature`, `Rule`, `Background`, `Scenario`, `ExampleTable`, `Step`, `DataTable`, `DocString`, `TableRow`, `TableCell`, `Tag` and `Comment`.
  - Each carries a class-level `type` from `AstType`.
  - `GherkinDocument.set_uri(uri)` accepts `str` or UTF-8 `bytes` and ignores an empty value.
- `gherkin_kit.reader` reads files:
  - `read_source(file_name)` returns a file's content decoded as UTF-8, with invalid bytes replaced. It returns `''` if the file cannot be opened.
  - `FileTokenScanner(file_name)` returns one `Token` per line. Lines end at `\n`, `\r` or `\r\n`. After the last line it returns end-of-input tokens with increasing line numbers. A file that cannot be opened behaves as an empty one.
  - The scanner is a context manager. Iterating it stops after the first end-of-input token.

## Install

```
pip install gherkin-kit
```

## Examples

Inspect a line:

```python
from gherkin_kit.gherkin_line import GherkinLine

line = GherkinLine("  | name | value |", 3)
for cell in line.table_cells():
    print(cell.column, cell.text)
# 5 name
# 12 value
```

Scan a file:

```python
from gherkin_kit.reader import FileTokenScanner, read_source

text = read_source("example.feature")

with FileTokenScanner("example.feature") as scanner:
    for token in scanner:
        if token.is_eof():
            break
        print(token.location.line, token.line.line_text)
```

## What it does not do

The package has no parser, no token matcher and no keyword dialects for the Gherkin languages. It does not compile documents into executable scenarios. It has no command-line program. The `ast` classes are plain data containers, and nothing in the package builds them from source text.

## Running the tests

```
pip install -e ".[test]"
pytest
```