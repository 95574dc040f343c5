"""Declarative field constraints for request dataclasses.

Constraints are attached to dataclass fields through ``metadata`` and
checked together, so every violation is reported at once::

    @dataclass(frozen=True)
    class Request:
        amount: float = constrained(positive())

    validate(Request(amount=-1))   # ["amount must be greater than 0"]
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Generic, TypeVar

from credit_schedule.exceptions import ValidationError

T = TypeVar("T")

_METADATA_KEY = "constraints"


@dataclass(frozen=True)
class Constraint:
    """A single predicate with the message reported when it fails."""

    check: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of validating a value: either the value or its violations."""

    value: T | None = None
    errors: tuple[str, ...] = ()

    @property
    def is_ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> T:
        """Return the value, raising the aggregated ValidationError if invalid."""
        if self.errors:
            raise ValidationError(self.errors)
        return self.value  # type: ignore[return-value]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def required() -> Constraint:
    return Constraint(lambda v: v is not None, "must not be null")


def positive() -> Constraint:
    return Constraint(lambda v: _is_number(v) and v > 0, "must be greater than 0")


def integer() -> Constraint:
    return Constraint(
        lambda v: isinstance(v, int) and not isinstance(v, bool), "must be an integer"
    )


def boolean() -> Constraint:
    return Constraint(lambda v: isinstance(v, bool), "must be true or false")


def non_negative() -> Constraint:
    return Constraint(lambda v: _is_number(v) and v >= 0, "must be greater than or equal to 0")


def not_blank() -> Constraint:
    return Constraint(lambda v: isinstance(v, str) and v.strip() != "", "must not be blank")


def member_of(enum_cls: type) -> Constraint:
    names = ", ".join(str(m.value) for m in enum_cls)
    return Constraint(lambda v: isinstance(v, enum_cls), f"must be one of: {names}")


def constrained(*constraints: Constraint, **kwargs: Any) -> Any:
    """Declare a dataclass field carrying the given constraints."""
    return field(metadata={_METADATA_KEY: constraints}, **kwargs)


def validate(obj: Any) -> list[str]:
    """Return every violated-field message for a dataclass instance.

    Field constraints are checked in declaration order; only the first
    failing constraint of each field is reported. Whole-object checks
    declared in ``__object_constraints__`` follow.
    """
    violations: list[str] = []
    for f in fields(obj):
        value = getattr(obj, f.name)
        for constraint in f.metadata.get(_METADATA_KEY, ()):
            if not constraint.check(value):
                violations.append(f"{f.name} {constraint.message}")
                break

    # Object-level rules only make sense once every field is well formed
    if not violations:
        for constraint in getattr(obj, "__object_constraints__", ()):
            if not constraint.check(obj):
                violations.append(constraint.message)
    return violations


def check(obj: T) -> Result[T]:
    """Validate ``obj`` and wrap the outcome in a Result."""
    errors = tuple(validate(obj))
    if errors:
        return Result(errors=errors)
    return Result(value=obj)


def ensure_valid(obj: T) -> T:
    """Return ``obj`` unchanged or raise the aggregated ValidationError."""
    return check(obj).unwrap()
