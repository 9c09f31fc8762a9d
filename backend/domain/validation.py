"""
Form validation and sanitization for catalog entities.

Each form field runs an ordered chain of steps. A step receives the current
value and returns the next one, or raises ValueError to reject the field.
Validation never raises to the caller: it returns a ValidationResult holding
the sanitized values and an ordered list of field errors.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from markupsafe import escape as _markup_escape

Step = Callable[[Any], Any]


@dataclass
class FieldError:
    """A single rejected field, shaped for redisplay in a form."""
    param: str
    msg: str
    value: Any = None


@dataclass
class ValidationResult:
    values: Dict[str, Any]
    errors: List[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def errors_for(self, param: str) -> List[FieldError]:
        return [e for e in self.errors if e.param == param]


class _SkipRemaining(Exception):
    """Raised by optional steps to end a chain early without an error."""


def trim(value: Any) -> str:
    return "" if value is None else str(value).strip()


def required(value: str) -> str:
    if len(value) < 1:
        raise ValueError("required")
    return value


def escape(value: Any) -> str:
    """Escape &, <, >, " and ' so the value is safe to embed in markup."""
    return str(_markup_escape("" if value is None else value))


def optional(value: Any) -> Any:
    """Stop the chain for falsy input; the field is then treated as absent."""
    if not value:
        raise _SkipRemaining()
    return value


def to_date(value: Any) -> date:
    """Parse an ISO-8601 date or datetime string into a calendar date."""
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value).strip()).date()


class FieldRules:
    """An ordered chain of steps for one form field."""

    def __init__(self, param: str, message: str = "Invalid value", absent: Any = None):
        self.param = param
        self.message = message
        self.absent = absent
        self.steps: List[Step] = []

    def then(self, step: Step) -> "FieldRules":
        self.steps.append(step)
        return self

    def run(self, raw: Any) -> tuple[Any, Optional[FieldError]]:
        value = raw
        for step in self.steps:
            try:
                value = step(value)
            except _SkipRemaining:
                return self.absent, None
            except ValueError:
                return value, FieldError(param=self.param, msg=self.message, value=value)
        return value, None


def run_rules(rules: List[FieldRules], form: Mapping[str, Any]) -> ValidationResult:
    values: Dict[str, Any] = {}
    errors: List[FieldError] = []
    for rule in rules:
        value, error = rule.run(form.get(rule.param))
        values[rule.param] = value
        if error is not None:
            errors.append(error)
    return ValidationResult(values=values, errors=errors)


GENRE_RULES = [
    FieldRules("name", "Genre name required").then(trim).then(required).then(escape),
]

BOOKINSTANCE_RULES = [
    FieldRules("book", "Book must be specified").then(trim).then(required).then(escape),
    FieldRules("imprint", "Imprint must be specified").then(trim).then(required).then(escape),
    FieldRules("status").then(escape),
    FieldRules("due_back", "Invalid date").then(trim).then(optional).then(to_date),
]


def validate_genre(form: Mapping[str, Any]) -> ValidationResult:
    return run_rules(GENRE_RULES, form)


def validate_bookinstance(form: Mapping[str, Any]) -> ValidationResult:
    return run_rules(BOOKINSTANCE_RULES, form)
