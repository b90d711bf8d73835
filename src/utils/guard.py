"""Guard functions shared by the domain models."""
from datetime import datetime
from typing import Any, Optional, Tuple

from src.utils.exceptions import (
    InvalidArgumentError,
    NullArgumentError,
    OutOfRangeError,
)


def reject_null(value: Any, field_name: str) -> Any:
    """
    Ensure a required value is present.

    Args:
        value: Value to check
        field_name: Name reported in the error

    Returns:
        The value, unchanged

    Raises:
        NullArgumentError: If value is None
    """
    if value is None:
        raise NullArgumentError(f"{field_name} cannot be null.", field_name)
    return value


def normalize_or_absent(text: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    Decide whether optional text should be stored or treated as absent.

    Args:
        text: Candidate text (may be None)

    Returns:
        Tuple of (present: bool, value: Optional[str])
        - (True, text) if text has at least one non-whitespace character
        - (False, None) for None, "" or whitespace-only text

    The returned text is never trimmed.
    """
    if text is not None and text.strip():
        return True, text
    return False, None


def reject_blank(value: Optional[str], field_name: str) -> str:
    """
    Validate a required text field and return it trimmed.

    Raises:
        NullArgumentError: If value is None
        InvalidArgumentError: If value is empty or whitespace-only
    """
    reject_null(value, field_name)
    if not value.strip():
        label = field_name.replace("_", " ").capitalize()
        raise InvalidArgumentError(f"{label} cannot be empty or whitespace.", field_name)
    return value.strip()


def reject_non_positive(value: Optional[int], field_name: str) -> int:
    """
    Ensure an integer is greater than zero.

    Args:
        value: Integer to check
        field_name: Name reported in the error

    Returns:
        The value, unchanged

    Raises:
        NullArgumentError: If value is None
        InvalidArgumentError: If value is not an integer
        OutOfRangeError: If value <= 0
    """
    reject_null(value, field_name)
    # bool is an int subclass but never a meaningful id or capacity
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{field_name} must be an integer.", field_name)
    if value <= 0:
        raise OutOfRangeError(f"{field_name} must be greater than zero.", field_name)
    return value


def reject_past_or_present(
    date: datetime,
    field_name: str,
    now: Optional[datetime] = None
) -> datetime:
    """
    Ensure a datetime is strictly later than the current time.

    Args:
        date: Datetime to check
        field_name: Name reported in the error
        now: Reference time (defaults to the current time in date's timezone)

    Returns:
        The date, unchanged

    Raises:
        NullArgumentError: If date is None
        InvalidArgumentError: If date is not after now, or if only one of
            date and now carries a timezone
    """
    reject_null(date, field_name)
    if now is None:
        now = datetime.now(date.tzinfo)
    elif (date.tzinfo is None) != (now.tzinfo is None):
        raise InvalidArgumentError(
            f"{field_name} and the reference time must both be naive or both timezone-aware.",
            field_name
        )
    if date <= now:
        raise InvalidArgumentError(f"{field_name} cannot be in the past.", field_name)
    return date


def is_valid_email(text: Optional[str]) -> bool:
    """Return True if text is non-blank and contains '@'."""
    return bool(text and text.strip()) and "@" in text
