from typing import Any

from paginator.core.exceptions import InvalidArgument


def is_positive_integer(value: Any) -> bool:
    # bool is an int subclass but never a page number
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def require_positive_integer(name: str, value: Any) -> int:
    if not is_positive_integer(value):
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
    return value
