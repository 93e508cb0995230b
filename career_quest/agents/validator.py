# career_quest/agents/validator.py
from typing import Any

from pydantic import ValidationError

from career_quest.agents.errors import SchemaValidationError
from career_quest.agents.schemas import CONTENT_MODELS, ContentKind, ValidatedContent


def _error_paths(err: ValidationError) -> list[str]:
    paths: list[str] = []
    for item in err.errors():
        path = ".".join(str(part) for part in item["loc"]) or "<root>"
        if path not in paths:
            paths.append(path)
    return paths


def validate_content(kind: ContentKind, value: Any) -> ValidatedContent:
    """
    Check that a parsed response carries the required fields for ``kind``.

    Only presence and gross type are checked; nested items are left for the
    caller to map and default.
    """
    kind = ContentKind(kind)
    model = CONTENT_MODELS[kind]
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise SchemaValidationError(kind.value, _error_paths(e)) from e
