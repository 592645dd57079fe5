from dataclasses import dataclass, fields, replace

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Settings:
    """library-wide knobs"""
    numpy_sort: bool = True  # numpy fast path for plain numeric sorts
    numpy_sort_threshold: int = 32  # minimum size for the numpy path


_settings = Settings()


def get_settings() -> Settings:
    return _settings


def configure(**changes) -> Settings:
    """replace the active settings, e.g. configure(numpy_sort=False)"""
    global _settings
    known = {f.name for f in fields(Settings)}
    unknown = set(changes) - known
    if unknown:
        raise InvalidArgumentError(f"unknown settings: {', '.join(sorted(unknown))}")
    for name, value in changes.items():
        expected = type(getattr(_settings, name))
        # bool is an int subclass; keep flags and counts apart
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise InvalidArgumentError(
                f"setting '{name}' expects {expected.__name__}, got {type(value).__name__}")
    _settings = replace(_settings, **changes)
    return _settings
