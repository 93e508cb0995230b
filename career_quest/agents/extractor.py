# career_quest/agents/extractor.py
import json
from typing import Any

from career_quest.agents.errors import ExtractionError, ExtractionReason

DEFAULT_SNIPPET_LIMIT = 500


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _loads_strict(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def _extract_first_json_object(text: str, start: int) -> str | None:
    """
    Extract the first complete top-level JSON object using brace counting.
    Braces inside string literals are skipped.
    Returns the first balanced { ... } substring, or None if not found.
    """
    brace_count = 0
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            brace_count += 1
        elif ch == "}":
            brace_count -= 1
            if brace_count == 0:
                return text[start:i + 1]

    return None


def extract_json(
    raw: str,
    *,
    snippet_limit: int = DEFAULT_SNIPPET_LIMIT,
    balanced_fallback: bool = True,
) -> Any:
    """
    Parse the JSON object embedded in a model response.

    The candidate span runs from the first "{" to the last "}" inclusive, so
    leading prose and markdown fences are ignored. When that span does not
    parse and ``balanced_fallback`` is set, the first balanced object is tried
    instead (a response echoing two sibling objects yields the first one).

    Raises ExtractionError with reason NO_JSON_FOUND or MALFORMED_JSON.
    """
    if not isinstance(raw, str):
        raise ExtractionError(ExtractionReason.NO_JSON_FOUND)

    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end == -1 or end <= start:
        raise ExtractionError(ExtractionReason.NO_JSON_FOUND)

    candidate = raw[start:end + 1]
    try:
        return _loads_strict(candidate)
    except (ValueError, RecursionError):
        pass

    if balanced_fallback:
        first_object = _extract_first_json_object(raw, start)
        if first_object and first_object != candidate:
            try:
                return _loads_strict(first_object)
            except (ValueError, RecursionError):
                pass

    raise ExtractionError(
        ExtractionReason.MALFORMED_JSON,
        snippet=candidate[:snippet_limit],
    )
