"""Recover a JSON value from free-form model output.

Models are asked to answer with bare JSON but routinely wrap it in prose or
Markdown fences. The strategies below are tried in order, cheapest and most
specific first, and the first one that yields a parsed value wins.
"""

import json
import re
from typing import Any, Callable, List, NamedTuple, Tuple

_FENCE_RE = re.compile(r"```(?:json|JSON)?[ \t]*\r?\n?([\s\S]*?)```")
_DECODER = json.JSONDecoder()


class ExtractionResult(NamedTuple):
    found: bool
    value: Any = None
    strategy: str | None = None


NOT_FOUND = ExtractionResult(found=False)


def _try_loads(text: str) -> Tuple[bool, Any]:
    try:
        return True, json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return False, None


def parse_direct(text: str, allow_array: bool = False) -> Tuple[bool, Any]:
    stripped = text.strip()
    if not stripped:
        return False, None
    return _try_loads(stripped)


def parse_fenced(text: str, allow_array: bool = False) -> Tuple[bool, Any]:
    for match in _FENCE_RE.finditer(text):
        body = match.group(1).strip()
        if not body:
            continue
        ok, value = _try_loads(body)
        if ok:
            return True, value
    return False, None


def parse_bracket_scan(text: str, allow_array: bool = False) -> Tuple[bool, Any]:
    openers = "{[" if allow_array else "{"
    for idx, char in enumerate(text):
        if char not in openers:
            continue
        try:
            value, _ = _DECODER.raw_decode(text, idx)
        except (json.JSONDecodeError, RecursionError):
            continue
        if isinstance(value, list) and not any(isinstance(item, dict) for item in value):
            # citations like "[1]" in prose, not a payload
            continue
        return True, value
    return False, None


STRATEGIES: List[Tuple[str, Callable[[str, bool], Tuple[bool, Any]]]] = [
    ("direct", parse_direct),
    ("fenced", parse_fenced),
    ("bracket", parse_bracket_scan),
]


def extract_json(text: Any, allow_array: bool = False) -> ExtractionResult:
    """
    Extract the first JSON value from model text.

    ``allow_array`` lets the bracket scan start at ``[`` as well as ``{``;
    the question generator answers with a list. Never raises: anything that
    cannot be recovered comes back as ``NOT_FOUND``.
    """
    if not isinstance(text, str):
        return NOT_FOUND

    for name, strategy in STRATEGIES:
        ok, value = strategy(text, allow_array)
        if ok:
            return ExtractionResult(found=True, value=value, strategy=name)
    return NOT_FOUND
