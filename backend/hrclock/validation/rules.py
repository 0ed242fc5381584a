"""
Field validation rules for request DTOs.

Each rule pairs a predicate with a message template. Rules are attached to
DTO fields with ``enforce`` and run in declaration order; the first failing
rule of a field is reported for that field.
"""
import re
from datetime import date
from typing import Any, Dict, Iterable, NamedTuple, Optional, Pattern, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

PASSWORD_SPECIAL_CHARS = "@$!%*?&-_+=.,:;#^~"
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&\-_+=.,:;#^~])", re.ASCII)
PHONE_NUMBER_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$", re.ASCII)
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


class RuleFailure(NamedTuple):
    """A failed rule: error code, message template and its interpolation context."""
    code: str
    template: str
    context: Dict[str, Any]

    @property
    def message(self) -> str:
        return self.template.format(**self.context)

    def as_error(self) -> PydanticCustomError:
        return PydanticCustomError(self.code, self.template, self.context)


class Rule:
    """
    Base validation rule.

    Subclasses implement ``test``. Absent values (None) pass every rule
    except the ones that set ``allows_none`` to False.
    """
    code = "invalid"
    default_message = "This value is not valid."
    allows_none = True

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message

    def test(self, value: Any) -> bool:
        raise NotImplementedError

    def context(self) -> Dict[str, Any]:
        return {}

    def check(self, value: Any) -> Optional[RuleFailure]:
        """
        Check a value against this rule.

        Args:
            value: Field value, possibly None

        Returns:
            Optional[RuleFailure]: None if the value passes, the failure otherwise
        """
        if value is None and self.allows_none:
            return None
        if self.test(value):
            return None
        return RuleFailure(self.code, self.message, self.context())

    def __repr__(self):
        return f"<{type(self).__name__}(message='{self.message}')>"


class NotNull(Rule):
    code = "not_null"
    default_message = "This value should not be null."
    allows_none = False

    def test(self, value: Any) -> bool:
        return value is not None


class NotBlank(Rule):
    """Value present and, for strings and collections, non-empty once trimmed."""
    code = "not_blank"
    default_message = "This value should not be blank."
    allows_none = False

    def test(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        if isinstance(value, (list, tuple, set, dict)):
            return len(value) > 0
        return True


class Length(Rule):
    """String length within [min, max], inclusive."""
    code = "length"
    min_message = "This value is too short. It should have {limit} characters or more."
    max_message = "This value is too long. It should have {limit} characters or less."

    def __init__(self, min: Optional[int] = None, max: Optional[int] = None,
                 min_message: Optional[str] = None, max_message: Optional[str] = None):
        if min is None and max is None:
            raise ValueError("Length rule needs at least one bound")
        if min is not None and max is not None and min > max:
            raise ValueError(f"Length rule min ({min}) is greater than max ({max})")
        super().__init__()
        self.min = min
        self.max = max
        if min_message:
            self.min_message = min_message
        if max_message:
            self.max_message = max_message

    def check(self, value: Any) -> Optional[RuleFailure]:
        if value is None:
            return None
        length = len(value)
        if self.min is not None and length < self.min:
            return RuleFailure("too_short", self.min_message, {"limit": self.min})
        if self.max is not None and length > self.max:
            return RuleFailure("too_long", self.max_message, {"limit": self.max})
        return None

    def __repr__(self):
        return f"<Length(min={self.min}, max={self.max})>"


class Positive(Rule):
    code = "positive"
    default_message = "This value should be positive."

    def test(self, value: Any) -> bool:
        return value > 0


class Email(Rule):
    code = "email"
    default_message = "This value is not a valid email address."

    def test(self, value: Any) -> bool:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True


class Regex(Rule):
    """Pattern must be found in the value (``re.search`` semantics)."""
    code = "pattern"

    def __init__(self, pattern: Union[str, Pattern], message: Optional[str] = None):
        super().__init__(message)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def test(self, value: Any) -> bool:
        return self.pattern.search(value) is not None

    def __repr__(self):
        return f"<Regex(pattern='{self.pattern.pattern}')>"


class Choice(Rule):
    code = "choice"
    default_message = "The value you selected is not a valid choice."

    def __init__(self, choices: Iterable[Any], message: Optional[str] = None):
        super().__init__(message)
        self.choices = tuple(choices)

    def test(self, value: Any) -> bool:
        return value in self.choices

    def context(self) -> Dict[str, Any]:
        return {"choices": ", ".join(str(choice) for choice in self.choices)}


class Date(Rule):
    """Calendar date written as YYYY-MM-DD."""
    code = "date"
    default_message = "This value is not a valid date."

    def test(self, value: Any) -> bool:
        if not DATE_PATTERN.match(value):
            return False
        try:
            date.fromisoformat(value)
        except ValueError:
            return False
        return True


def first_failure(value: Any, rules: Iterable[Rule]) -> Optional[RuleFailure]:
    """Run rules in order and return the first failure, if any."""
    for rule in rules:
        failure = rule.check(value)
        if failure is not None:
            return failure
    return None


# PUBLIC_INTERFACE
def enforce(*rules: Rule) -> AfterValidator:
    """
    Attach an ordered list of rules to a DTO field.

    Usage:
        name: Annotated[Optional[str], enforce(NotBlank(), Length(2, 100))] = None

    Args:
        rules: Rules to run, in order

    Returns:
        AfterValidator: Pydantic validator raising the first failing rule
    """
    def _validate(value):
        failure = first_failure(value, rules)
        if failure is not None:
            raise failure.as_error()
        return value

    return AfterValidator(_validate)
