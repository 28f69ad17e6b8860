from __future__ import annotations

import pytest

from log_json_converter.core.formats import AttributeExtractor, LineClassifier, unquote
from log_json_converter.core.models import LogLevel


def test_classify_full_line() -> None:
    line = 'INFO [03-15|14:22:05.123] user=alice action="log in" status=ok'
    out = LineClassifier().classify(line)
    assert out is not None
    assert out.level == LogLevel.INFO
    assert out.raw_timestamp == "03-15|14:22:05.123"
    assert out.message == 'user=alice action="log in" status=ok'


@pytest.mark.parametrize("level", ["INFO", "WARN", "ERROR", "DEBUG", "TRACE"])
def test_classify_every_level(level: str) -> None:
    out = LineClassifier().classify(f"{level} [01-01|00:00:00] hello")
    assert out is not None
    assert out.level == LogLevel(level)


def test_classify_without_space_before_bracket() -> None:
    out = LineClassifier().classify("WARN[01-02|03:04:05] tight")
    assert out is not None
    assert out.level == LogLevel.WARN
    assert out.message == "tight"


def test_classify_strips_line_terminator() -> None:
    out = LineClassifier().classify("TRACE [01-02|03:04:05] tail\r\n")
    assert out is not None
    assert out.message == "tail"


def test_classify_timestamp_stops_at_first_closing_bracket() -> None:
    out = LineClassifier().classify("ERROR [01-02|03:04:05] failed [code 7] again")
    assert out is not None
    assert out.raw_timestamp == "01-02|03:04:05"
    assert out.message == "failed [code 7] again"


@pytest.mark.parametrize(
    "line",
    [
        "garbage text no structure",
        "",
        "NOTICE [01-01|00:00:00] unknown level",
        "info [01-01|00:00:00] lowercase level",
        "INFO no bracketed timestamp",
        "INFO [01-01|00:00:00]",
        "INFO [] empty timestamp",
        " INFO [01-01|00:00:00] leading space",
    ],
)
def test_classify_rejects_non_matching_lines(line: str) -> None:
    assert LineClassifier().classify(line) is None


def test_classifier_restricted_levels() -> None:
    classifier = LineClassifier(levels=(LogLevel.ERROR,))
    assert classifier.classify("ERROR [01-01|00:00:00] boom") is not None
    assert classifier.classify("INFO [01-01|00:00:00] fine") is None


def test_extract_duplicate_keys_and_quoted_values() -> None:
    assert AttributeExtractor().extract('a=1 b="x y" a=2') == {"a": "2", "b": "x y"}


def test_extract_no_pairs() -> None:
    assert AttributeExtractor().extract("no kv pairs here") == {}


def test_extract_quoted_value_with_equals() -> None:
    assert AttributeExtractor().extract('query="a=b c" next=1') == {"query": "a=b c", "next": "1"}


def test_extract_bare_value_keeps_inner_equals() -> None:
    assert AttributeExtractor().extract("a=b=c") == {"a": "b=c"}


def test_extract_unterminated_quote_falls_back_to_bare_token() -> None:
    assert AttributeExtractor().extract('k="abc def') == {"k": '"abc'}


def test_extract_empty_quoted_value() -> None:
    assert AttributeExtractor().extract('k="" z=1') == {"k": "", "z": "1"}


def test_extract_requires_a_value() -> None:
    assert AttributeExtractor().extract("dangling= next") == {}


def test_extract_does_not_touch_escapes() -> None:
    assert AttributeExtractor().extract(r'p="C:\temp\" q=1') == {"p": "C:\\temp\\", "q": "1"}


@pytest.mark.parametrize(
    "attrs",
    [
        {"k": "v"},
        {"user": "alice", "status": "ok"},
        {"path": "/api/v1/items?x=1", "code": "404"},
    ],
)
def test_extract_recovers_embedded_pairs(attrs: dict[str, str]) -> None:
    body = " ".join(f"{k}={v}" for k, v in attrs.items())
    assert AttributeExtractor().extract(f"request done {body} end") == attrs


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ('"quoted"', "quoted"),
        ('""', ""),
        ('"', '"'),
        ('"open', '"open'),
        ("bare", "bare"),
        ('""twice""', '"twice"'),
    ],
)
def test_unquote(value: str, expected: str) -> None:
    assert unquote(value) == expected
