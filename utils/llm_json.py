# This project was developed with assistance from AI tools.
"""
JSON recovery from free-form model replies.

Extraction replies are asked to be JSON only, but models still wrap them in
code fences or add a sentence before or after. The first balanced object
that decodes to a dict wins; anything else degrades to an empty dict.
"""
import json
import logging
import re
from typing import Iterator

logger = logging.getLogger(__name__)

_CODE_BLOCK_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


def extract_json_object(text: str, prefer_code_block: bool = True) -> str:
    """
    Return the first valid JSON object string in ``text``.

    Fenced code blocks are scanned first when ``prefer_code_block`` is set.
    Raises ValueError when there is none.
    """
    source = text or ""
    if prefer_code_block:
        for match in _CODE_BLOCK_RE.finditer(source):
            candidate = _first_object(match.group(1))
            if candidate is not None:
                return candidate

    candidate = _first_object(source)
    if candidate is not None:
        return candidate
    raise ValueError("No JSON object found in model reply")


def parse_json_object(text: str) -> dict:
    """Decoded first JSON object of ``text``, or ``{}`` if the reply has none."""
    try:
        return json.loads(extract_json_object(text))
    except ValueError as e:
        logger.warning(f"Discarding model reply: {e} ({len(text or '')} chars)")
        return {}


def _first_object(text: str) -> str | None:
    for start in _open_braces(text):
        end = _matching_brace(text, start)
        if end is None:
            continue
        candidate = text[start:end + 1]
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return candidate
    return None


def _open_braces(text: str) -> Iterator[int]:
    idx = text.find("{")
    while idx != -1:
        yield idx
        idx = text.find("{", idx + 1)


def _matching_brace(text: str, start: int) -> int | None:
    depth = 0
    in_string = False
    escape = False

    for idx in range(start, len(text)):
        char = text[idx]
        if in_string:
            if escape:
                escape = False
            elif char == "\\":
                escape = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return idx
    return None
