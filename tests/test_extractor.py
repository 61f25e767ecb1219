"""Tests for JSON recovery from model text."""

import pytest

from interview_ai.core.extractor import NOT_FOUND, extract_json, parse_bracket_scan, parse_fenced


def test_direct_parse_wins_for_bare_json():
    """Clean JSON is matched by the direct strategy."""
    result = extract_json('{"a":1}')
    assert result.found
    assert result.value == {"a": 1}
    assert result.strategy == "direct"


def test_direct_parse_ignores_surrounding_whitespace():
    result = extract_json('\n\n  [{"question": "Why?"}]  \n')
    assert result.strategy == "direct"
    assert result.value == [{"question": "Why?"}]


def test_fenced_block_preferred_over_stray_braces():
    """A fenced block beats braces that appear in the prose around it."""
    text = (
        "Use {curly} placeholders like {this}.\n"
        "```json\n"
        '{"candidateName": "Jane Doe", "position": "Engineer", "title": "Engineer Interview"}\n'
        "```\n"
        "Trailing note with {more: braces}"
    )
    result = extract_json(text)
    assert result.strategy == "fenced"
    assert result.value["candidateName"] == "Jane Doe"


def test_untagged_fence_is_parsed():
    result = extract_json('Sure!\n```\n{"recommendation": "hire"}\n```')
    assert result.strategy == "fenced"
    assert result.value == {"recommendation": "hire"}


def test_second_fence_used_when_first_is_not_json():
    text = "```python\nprint('hi')\n```\nand\n```json\n{\"ok\": true}\n```"
    assert extract_json(text).value == {"ok": True}


def test_bracket_scan_finds_object_in_prose():
    text = 'Here is the result:\n\n{"code": "70553", "nested": {"x": [1, 2]}}\n\nHope this helps!'
    result = extract_json(text)
    assert result.strategy == "bracket"
    assert result.value == {"code": "70553", "nested": {"x": [1, 2]}}


def test_bracket_scan_skips_unparseable_opening_brace():
    text = 'Placeholder {name} first, then {"name": "Jane"} for real.'
    assert extract_json(text).value == {"name": "Jane"}


def test_bracket_scan_arrays_only_when_allowed():
    text = 'Questions: [{"question": "Why?"}] done'
    assert extract_json(text, allow_array=True).value == [{"question": "Why?"}]
    # without arrays the scan starts at the object inside the list
    assert extract_json(text).value == {"question": "Why?"}


def test_bracket_scan_skips_arrays_without_objects():
    """Bracketed prose before the real list does not win the scan."""
    text = 'See [1] below: [{"question": "Why Python?"}]'
    result = extract_json(text, allow_array=True)
    assert result.strategy == "bracket"
    assert result.value == [{"question": "Why Python?"}]
    assert not extract_json("Options are [1, 2] and [\"a\"]", allow_array=True).found


def test_malformed_json_in_fence_is_not_found():
    assert extract_json("```json\n{bad}\n```") == NOT_FOUND


@pytest.mark.parametrize("text", ["", "   ", "No JSON here", "{unterminated", "[1, 2"])
def test_no_json_returns_not_found(text):
    result = extract_json(text, allow_array=True)
    assert not result.found
    assert result.value is None
    assert result.strategy is None


@pytest.mark.parametrize("value", [None, 42, b'{"a": 1}', {"a": 1}])
def test_non_string_input_is_not_found(value):
    assert extract_json(value) == NOT_FOUND


def test_deeply_nested_input_does_not_raise():
    text = "[" * 3000 + "]" * 3000
    result = extract_json(text, allow_array=True)
    assert result.found in (True, False)


def test_strategies_are_independently_callable():
    assert parse_fenced("no fences") == (False, None)
    assert parse_bracket_scan('x {"a": 1} y') == (True, {"a": 1})
