"""Violation and result types shared by the availability, event and schedule validators."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from booking.core.exceptions import ViolationError

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationViolation:
    """A rule failure tied to one input field.

    ``index`` is the position of the failing candidate in a list input, or
    ``None`` for top-level fields.
    """

    index: int | None
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"index": self.index, "field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    value: T | None = None
    violations: tuple[ValidationViolation, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.violations

    def unwrap(self) -> T:
        if self.violations:
            raise ViolationError(self.violations)
        return self.value

    @classmethod
    def success(cls, value: T = None) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, violations) -> "ValidationResult[T]":
        return cls(violations=tuple(violations))
