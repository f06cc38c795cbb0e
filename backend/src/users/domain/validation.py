"""Declarative field rules for user payloads.

A rule pairs a wire field name with a predicate and the message reported when
the predicate fails. ``validate`` runs every rule and collects all failures in
rule order, so callers can report them together.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

PASSWORD_MIN_LENGTH = 6


@dataclass(frozen=True)
class FieldError:
    param: str
    msg: str
    value: Any = None
    location: str = "body"

    def to_dict(self) -> dict[str, Any]:
        return {
            "param": self.param,
            "msg": self.msg,
            "value": self.value,
            "location": self.location,
        }


@dataclass(frozen=True)
class Rule:
    field: str
    check: Callable[[Any], bool]
    message: str
    # Skip the rule when the field is missing or empty.
    optional: bool = False
    # Never echo the submitted value back.
    redact: bool = False


def is_present(value: Any) -> bool:
    return value is not None and value != ""


def not_empty(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def min_length(length: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value) >= length

    return check


FIRST_NAME_RULE = Rule("firstName", not_empty, "Please add a first name")
LAST_NAME_RULE = Rule("lastName", not_empty, "Please add a last name")
EMAIL_MESSAGE = "Please enter a valid email"
PASSWORD_MESSAGE = (
    f"Please enter a password with {PASSWORD_MIN_LENGTH} or more characters"
)

REGISTRATION_RULES: tuple[Rule, ...] = (
    FIRST_NAME_RULE,
    LAST_NAME_RULE,
    Rule("email", is_email, EMAIL_MESSAGE),
    Rule("password", min_length(PASSWORD_MIN_LENGTH), PASSWORD_MESSAGE, redact=True),
)

UPDATE_RULES: tuple[Rule, ...] = (
    Rule("email", is_email, EMAIL_MESSAGE, optional=True),
    Rule(
        "password",
        min_length(PASSWORD_MIN_LENGTH),
        PASSWORD_MESSAGE,
        optional=True,
        redact=True,
    ),
)


def validate(data: Mapping[str, Any], rules: Iterable[Rule]) -> list[FieldError]:
    errors = []
    for rule in rules:
        value = data.get(rule.field)
        if rule.optional and not is_present(value):
            continue
        if not rule.check(value):
            errors.append(
                FieldError(
                    param=rule.field,
                    msg=rule.message,
                    value=None if rule.redact else value,
                )
            )
    return errors


def errors_for(errors: Iterable[FieldError], field: str) -> list[FieldError]:
    return [error for error in errors if error.param == field]
