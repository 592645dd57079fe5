from typing import Any


class InvalidArgumentError(ValueError):
    """raised at call time when a required argument is missing or out of range."""
    pass


def check_not_none(value: Any, name: str) -> Any:
    """return value unchanged, raising InvalidArgumentError if it is None"""
    if value is None:
        raise InvalidArgumentError(f"'{name}' must not be None")
    return value
