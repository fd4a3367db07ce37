"""
Movie payload validation returning results instead of raising.

`validate_movie` checks a full movie, `validate_partial_movie` checks only
the fields that are present. Both return a `ValidationResult` whose `error`
is a list of field-keyed issues ready to be sent back to the client.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from app.models.movie_model import MovieCreate, MovieUpdate


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a movie payload."""

    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def ok(cls, data: Dict[str, Any]) -> "ValidationResult":
        """Successful result carrying the sanitized data."""
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, issues: List[Dict[str, Any]]) -> "ValidationResult":
        """Failed result carrying the structured issues."""
        return cls(success=False, error=issues)


def format_issues(exc: ValidationError) -> List[Dict[str, Any]]:
    """
    Turn a pydantic ValidationError into field-keyed issues.

    Args:
        exc: Error raised by model validation.

    Returns:
        One dict per violated constraint with `field`, `path`, `code`
        and `message`. Errors about the payload itself use field "body".
    """
    issues = []
    for err in exc.errors(include_url=False):
        loc = err.get("loc", ())
        issues.append({
            "field": str(loc[0]) if loc else "body",
            "path": list(loc),
            "code": err["type"],
            "message": err["msg"],
        })
    return issues


def _validate(model: type[BaseModel], candidate: Any, **dump_options) -> ValidationResult:
    try:
        parsed = model.model_validate(candidate)
    except ValidationError as e:
        return ValidationResult.failed(format_issues(e))
    return ValidationResult.ok(parsed.model_dump(**dump_options))


def validate_movie(candidate: Any) -> ValidationResult:
    """
    Validate a complete movie.

    Every field is required except `rate`, which falls back to its default.
    Unknown fields never reach `data`.
    """
    return _validate(MovieCreate, candidate)


def validate_partial_movie(candidate: Any) -> ValidationResult:
    """
    Validate the fields present in a movie patch.

    Absent fields are left out of `data`; an empty patch is a valid, empty
    result.
    """
    return _validate(MovieUpdate, candidate, exclude_unset=True)
