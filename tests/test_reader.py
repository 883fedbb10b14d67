import pytest

from gherkin_kit.reader import FileTokenScanner, read_source


@pytest.fixture
def write_file(tmp_path):
    def _write(data: bytes, name: str = "sample.feature"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


def test_read_source_returns_text(write_file):
    text = "Feature: Übung\n  Scenario: 𝄞 clef\n"
    path = write_file(text.encode("utf-8"))
    assert read_source(path) == text


def test_read_source_keeps_line_endings(write_file):
    data = b"a\r\nb\rc\n"
    path = write_file(data)
    assert read_source(path) == data.decode("utf-8")


def test_read_source_missing_file_gives_empty_string(tmp_path):
    assert read_source(tmp_path / "absent.feature") == ""


def test_read_source_accepts_str_path(write_file):
    path = write_file(b"Feature: x")
    assert read_source(str(path)) == "Feature: x"


def test_scanner_lines_and_numbers(write_file):
    path = write_file(b"Feature: A\n  Scenario: B\n")
    with FileTokenScanner(path) as scanner:
        tokens = list(scanner)
    assert [t.line.line_text for t in tokens[:-1]] == ["Feature: A", "  Scenario: B"]
    assert [t.location.line for t in tokens] == [1, 2, 3]
    assert tokens[-1].is_eof()
    assert not tokens[0].is_eof()


def test_scanner_line_carries_its_number_and_indent(write_file):
    path = write_file(b"x\n    Given y\n")
    with FileTokenScanner(path) as scanner:
        scanner.read()
        token = scanner.read()
    assert token.line.line_number == 2
    assert token.line.indent == 4
    assert token.line.trimmed_line == "Given y"


def test_scanner_last_line_without_newline(write_file):
    path = write_file(b"a\nb")
    with FileTokenScanner(path) as scanner:
        tokens = list(scanner)
    assert [t.line.line_text for t in tokens if not t.is_eof()] == ["a", "b"]
    assert len(tokens) == 3


@pytest.mark.parametrize("data", [b"a\r\nb", b"a\rb", b"a\nb", b"a\r\nb\r\n"])
def test_scanner_line_terminators(write_file, data):
    path = write_file(data)
    with FileTokenScanner(path) as scanner:
        texts = [t.line.line_text for t in scanner if not t.is_eof()]
    assert texts == ["a", "b"]


def test_scanner_blank_lines_are_kept(write_file):
    path = write_file(b"\n\nx\n")
    with FileTokenScanner(path) as scanner:
        tokens = list(scanner)
    assert [t.line.line_text for t in tokens[:-1]] == ["", "", "x"]
    assert tokens[0].line.is_empty()


def test_scanner_empty_file_gives_eof_on_line_one(write_file):
    path = write_file(b"")
    with FileTokenScanner(path) as scanner:
        tokens = list(scanner)
    assert len(tokens) == 1
    assert tokens[0].is_eof()
    assert tokens[0].location.line == 1


def test_scanner_missing_file_gives_eof(tmp_path):
    with FileTokenScanner(tmp_path / "absent.feature") as scanner:
        first = scanner.read()
        second = scanner.read()
    assert first.is_eof() and second.is_eof()
    assert (first.location.line, second.location.line) == (1, 2)


def test_scanner_keeps_giving_eof_after_end(write_file):
    path = write_file(b"only\n")
    with FileTokenScanner(path) as scanner:
        tokens = [scanner.read() for _ in range(4)]
    assert [t.is_eof() for t in tokens] == [False, True, True, True]
    assert [t.location.line for t in tokens] == [1, 2, 3, 4]


def test_scanner_after_close_gives_eof(write_file):
    path = write_file(b"a\nb\n")
    scanner = FileTokenScanner(path)
    assert scanner.read().line.line_text == "a"
    scanner.close()
    token = scanner.read()
    assert token.is_eof()
    assert token.location.line == 2


def test_scanner_decodes_utf8(write_file):
    text = "Funktionalität: 𝄞"
    path = write_file(text.encode("utf-8"))
    with FileTokenScanner(path) as scanner:
        token = scanner.read()
    assert token.line.line_text == text


def test_scanner_agrees_with_read_source(write_file):
    data = b"# language: en\n@tag\nFeature: F\r\n  Scenario: S\r  Given g\n"
    path = write_file(data)
    with FileTokenScanner(path) as scanner:
        texts = [t.line.line_text for t in scanner if not t.is_eof()]
    assert texts == read_source(path).splitlines()