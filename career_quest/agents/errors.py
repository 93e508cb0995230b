"""Error taxonomy for content generation.

Every error below is absorbed by the generation pipeline and turned into a
fallback payload. Request validation errors are the only failures that reach
an HTTP client, and those come from FastAPI itself.
"""

from enum import Enum


class GenerationErrorCategory(str, Enum):
    MODEL_UNAVAILABLE = "model_unavailable"
    EXTRACTION = "extraction"
    SCHEMA_VALIDATION = "schema_validation"


class GenerationError(RuntimeError):
    """Base exception for failures inside the generation pipeline."""

    def __init__(self, message: str, *, category: GenerationErrorCategory) -> None:
        super().__init__(message)
        self.category = category


class ModelUnavailableError(GenerationError):
    """No credential, network failure, timeout, quota or a bad provider reply."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=GenerationErrorCategory.MODEL_UNAVAILABLE)


class ExtractionReason(str, Enum):
    NO_JSON_FOUND = "no_json_found"
    MALFORMED_JSON = "malformed_json"


class ExtractionError(GenerationError):
    """Raised when no JSON object can be pulled out of a model response."""

    def __init__(self, reason: ExtractionReason, *, snippet: str | None = None) -> None:
        if reason is ExtractionReason.NO_JSON_FOUND:
            message = "AI response did not contain a JSON object"
        else:
            message = "AI response contained malformed JSON"
        super().__init__(message, category=GenerationErrorCategory.EXTRACTION)
        self.reason = reason
        self.snippet = snippet


class SchemaValidationError(GenerationError):
    """Raised when a parsed response lacks the fields its content kind requires."""

    def __init__(self, kind: str, missing_fields: list[str]) -> None:
        super().__init__(
            f"AI response for {kind} does not have the expected structure. "
            f"Missing or invalid: {', '.join(missing_fields)}",
            category=GenerationErrorCategory.SCHEMA_VALIDATION,
        )
        self.kind = kind
        self.missing_fields = missing_fields
