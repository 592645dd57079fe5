"""
'    _ __             ____      __    __
'   (_) /____  _____ / __/___  / /___/ /
'  / / __/ _ \/ ___// /_/ __ \/ / __  /
' / / /_/  __/ /   / __/ /_/ / / /_/ /
'/_/\__/\___/_/   /_/  \____/_/\__,_/
"""

# expose the lazy sequence
from .lazy import LazyIterable, empty, from_iterable, P

# expose the functional operations
from .functions import (
    zip_with,
    select,
    where,
    all_of,
    sort,
    reduce,
    first_or_none,
    element_at_or_default,
    skip,
    find,
    min,
    max
)

# expose comparators
from .comparators import natural_order, from_comparable, by_key, reverse

# expose configuration and errors
from .config import Settings, get_settings, configure
from .errors import InvalidArgumentError

# define what `import *` does; min and max stay out so builtins are not shadowed
__all__ = [
    "LazyIterable",
    "empty",
    "from_iterable",
    "P",
    "zip_with",
    "select",
    "where",
    "all_of",
    "sort",
    "reduce",
    "first_or_none",
    "element_at_or_default",
    "skip",
    "find",
    "natural_order",
    "from_comparable",
    "by_key",
    "reverse",
    "Settings",
    "get_settings",
    "configure",
    "InvalidArgumentError"
]
