"""
Validation error taxonomy and path-qualified error reporting.

Pydantic reports failures with a ``loc`` that mixes payload keys with
internal union tags and union member names. This module translates every
Pydantic error into a ``ValidationIssue`` whose ``path`` is made only of
keys and indices that exist in the original payload, classified into one of
five kinds.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wacloud.schemas.core.types import ValidationMode

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Classification of a single validation failure."""

    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    CONSTRAINT_VIOLATION = "constraint_violation"
    UNKNOWN_UNION_VARIANT = "unknown_union_variant"
    UNION_EXHAUSTED = "union_exhausted"


# Custom Pydantic error types raised by the resolvers and primitive validators
UNKNOWN_VARIANT_ERROR = "unknown_union_variant"
UNION_EXHAUSTED_ERROR = "union_exhausted"
NUMBER_LIKE_TYPE_ERROR = "number_like_type"

_MISSING_TYPES = {"missing", "union_tag_not_found"}
_TYPE_MISMATCH_TYPES = {
    "extra_forbidden",
    "int_from_float",
    "json_invalid",
    "json_type",
    "model_attributes_type",
    NUMBER_LIKE_TYPE_ERROR,
}
_UNKNOWN_VARIANT_TYPES = {UNKNOWN_VARIANT_ERROR, "union_tag_invalid"}

# Message of each strict union error -> the discriminator key it reports on.
# Kept out of the Discriminator metadata, which must stay hashable.
_DISCRIMINATOR_KEYS: dict[str, str] = {}


def unknown_variant_message(label: str, field: str) -> str:
    """Return the error message of a strict union and remember its key."""
    message = f"Unrecognized {label} in '{field}'"
    _DISCRIMINATOR_KEYS[message] = field
    return message


def classify_error_type(error_type: str) -> ErrorKind:
    """Map a Pydantic error type to an ErrorKind."""
    if error_type in _MISSING_TYPES:
        return ErrorKind.MISSING_FIELD
    if error_type in _UNKNOWN_VARIANT_TYPES:
        return ErrorKind.UNKNOWN_UNION_VARIANT
    if error_type == UNION_EXHAUSTED_ERROR:
        return ErrorKind.UNION_EXHAUSTED
    if (
        error_type in _TYPE_MISMATCH_TYPES
        or error_type.endswith("_type")
        or error_type.endswith("_parsing")
    ):
        return ErrorKind.TYPE_MISMATCH
    return ErrorKind.CONSTRAINT_VIOLATION


class ValidationIssue(BaseModel):
    """One violation found in a payload."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind = Field(..., description="Classification of the failure")
    path: tuple[str | int, ...] = Field(
        ..., description="Keys and indices from the payload root to the offending value"
    )
    message: str = Field(..., description="Human readable explanation")
    constraint: str = Field(..., description="Pydantic error type that failed")
    input: Any = Field(None, description="The offending input value")

    @property
    def location(self) -> str:
        """Dotted path with list indices in brackets, e.g. ``entry[0].id``."""
        rendered = ""
        for step in self.path:
            if isinstance(step, int):
                rendered += f"[{step}]"
            else:
                rendered += f".{step}" if rendered else step
        return rendered or "<root>"

    def __str__(self) -> str:
        return f"{self.location}: {self.message} ({self.kind.value})"


class WhatsAppValidationError(Exception):
    """Raised when a payload fails validation and the caller asked for an exception."""

    def __init__(self, message: str, issues: list[ValidationIssue] | None = None):
        self.message = message
        self.issues = issues or []
        self.field = self.issues[0].location if self.issues else None
        self.value = self.issues[0].input if self.issues else None
        super().__init__(message)

    def __str__(self) -> str:
        if not self.issues:
            return self.message
        details = "; ".join(str(issue) for issue in self.issues[:5])
        more = len(self.issues) - 5
        suffix = f" (+{more} more)" if more > 0 else ""
        return f"{self.message}: {details}{suffix}"


class ValidationResult(BaseModel, Generic[T]):
    """
    Outcome of a decode or build call.

    Exactly one of ``value`` and ``errors`` is meaningful: ``success`` tells
    which. ``raise_for_errors()`` converts a failure into an exception for
    callers that prefer raising.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    value: T | None = None
    errors: list[ValidationIssue] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T) -> "ValidationResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def failed(cls, issues: list[ValidationIssue]) -> "ValidationResult[T]":
        return cls(success=False, errors=issues)

    def raise_for_errors(self, message: str = "Payload validation failed") -> T:
        """Return the value, or raise WhatsAppValidationError carrying the issues."""
        if not self.success:
            raise WhatsAppValidationError(message, list(self.errors))
        return self.value


def payload_path(payload: Any, loc: tuple, error_type: str) -> tuple[str | int, ...]:
    """
    Project a Pydantic ``loc`` onto the original payload.

    Steps that exist in the payload are kept; union tags and union member
    names are dropped. The last step of a ``missing`` error names an absent
    key and is kept as well.
    """
    path: list[str | int] = []
    node = payload
    last_index = len(loc) - 1
    for index, step in enumerate(loc):
        if isinstance(node, dict) and isinstance(step, str) and step in node:
            path.append(step)
            node = node[step]
        elif (
            isinstance(node, list)
            and isinstance(step, int)
            and not isinstance(step, bool)
            and 0 <= step < len(node)
        ):
            path.append(step)
            node = node[step]
        elif index == last_index and error_type in _MISSING_TYPES and isinstance(step, str):
            path.append(step)
    return tuple(path)


def issue_from_error(error: dict[str, Any], payload: Any) -> ValidationIssue:
    """Build a ValidationIssue from one entry of ``ValidationError.errors()``."""
    error_type = error["type"]
    kind = classify_error_type(error_type)
    path = payload_path(payload, tuple(error.get("loc", ())), error_type)
    error_input = error.get("input")

    # Point unknown variants at the discriminator key. An absent
    # discriminator is a missing field, not an unknown variant.
    ctx = error.get("ctx") or {}
    discriminator = ctx.get("discriminator") or _DISCRIMINATOR_KEYS.get(error["msg"])
    if (
        error_type == UNKNOWN_VARIANT_ERROR
        and discriminator
        and isinstance(error_input, dict)
    ):
        path = (*path, discriminator)
        error_input = error_input.get(discriminator)
        if error_input is None:
            kind = ErrorKind.MISSING_FIELD

    if isinstance(error_input, dict | list):
        # Keep issues small: the container itself is reachable through path
        error_input = None

    return ValidationIssue(
        kind=kind,
        path=path,
        message=error["msg"],
        constraint=error_type,
        input=error_input,
    )


def payload_position(payload: Any, path: tuple[str | int, ...]) -> tuple[int, ...]:
    """
    Sort key placing ``path`` where it occurs in the payload.

    Dict steps rank by key insertion order, list steps by index. A key that
    is absent from its object ranks after every key that is present.
    """
    position: list[int] = []
    node = payload
    for step in path:
        if isinstance(node, dict):
            keys = list(node)
            position.append(keys.index(step) if step in node else len(keys))
            node = node.get(step)
        elif isinstance(node, list) and isinstance(step, int):
            position.append(step)
            node = node[step] if 0 <= step < len(node) else None
        else:
            break
    return tuple(position)


def issues_from_validation_error(
    exc: ValidationError,
    payload: Any,
    mode: ValidationMode = ValidationMode.COLLECT_ALL,
) -> list[ValidationIssue]:
    """
    Convert a Pydantic ValidationError into ValidationIssues.

    Args:
        exc: The error raised by a model or TypeAdapter
        payload: The input that was validated, used to resolve paths
        mode: FAIL_FAST keeps only the first issue in payload order

    Returns:
        Issues in payload order, deduplicated on (kind, path, constraint)
    """
    issues: list[ValidationIssue] = []
    seen: set[tuple] = set()
    for error in exc.errors(include_url=False):
        issue = issue_from_error(error, payload)
        key = (issue.kind, issue.path, issue.constraint)
        if key not in seen:
            seen.add(key)
            issues.append(issue)

    # Pydantic reports in model field order, not in the order of the input
    issues.sort(key=lambda issue: payload_position(payload, issue.path))
    if mode is ValidationMode.FAIL_FAST:
        return issues[:1]
    return issues
