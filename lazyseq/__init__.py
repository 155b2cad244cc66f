r"""
'    __
'   / /___ _____  __  __________  ____ _
'  / / __ `/_  / / / / / ___/ _ \/ __ `/
' / / /_/ / / /_/ /_/ (__  )  __/ /_/ /
'/_/\__,_/ /___/\__, /____/\___/\__, /
'              /____/             /_/
"""
import logging

# expose the main classes
from .stream import Stream, Cell, Suspended, Thunk, EMPTY

# expose the factory functions
from .factories import (
    empty,
    cons,
    of,
    from_iterable,
    from_range,
    from_scalar,
    unfold,
    build,
    repeat,
    gen,
    seq
)

# expose memoization and matching
from .memo import Memoized, memoize, memoize_recursive
from .matcher import Matcher, MatcherBuilder, when, literal

# expose errors and settings
from .errors import (
    LazySeqError,
    EmptySequenceError,
    IndexOutOfRangeError,
    MatcherMisconfigured,
    ForceLimitExceeded
)
from .config import Settings, configure, get_settings
from .types import CacheInfo

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Stream",
    "Cell",
    "Suspended",
    "Thunk",
    "EMPTY",
    "empty",
    "cons",
    "of",
    "from_iterable",
    "from_range",
    "from_scalar",
    "unfold",
    "build",
    "repeat",
    "gen",
    "seq",
    "Memoized",
    "memoize",
    "memoize_recursive",
    "Matcher",
    "MatcherBuilder",
    "when",
    "literal",
    "LazySeqError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "MatcherMisconfigured",
    "ForceLimitExceeded",
    "Settings",
    "configure",
    "get_settings",
    "CacheInfo"
]
