import os
import logging
from dataclasses import dataclass, replace
from typing import Optional

logger = logging.getLogger(__name__)

FORCE_LIMIT_ENV = 'LAZYSEQ_FORCE_LIMIT'


def _force_limit_from_env() -> Optional[int]:
    raw = os.environ.get(FORCE_LIMIT_ENV, '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"{FORCE_LIMIT_ENV} must be an integer, got {raw!r}")
    return limit if limit > 0 else None


@dataclass(frozen=True)
class Settings:
    """library-wide knobs"""
    # max nodes a single forcing walk (reduce, sum, get, iteration...) may visit.
    # None means unbounded: termination is then the caller's job (take/take_while first).
    force_limit: Optional[int] = None

    def __post_init__(self):
        if self.force_limit is not None and self.force_limit < 1:
            raise ValueError("force_limit must be a positive integer or None")


_active = Settings(force_limit=_force_limit_from_env())


def get_settings() -> Settings:
    return _active


def configure(**changes) -> Settings:
    """replace the active settings, e.g. configure(force_limit=10_000). returns the previous settings."""
    global _active
    previous = _active
    _active = replace(_active, **changes)
    logger.debug("settings changed: %s -> %s", previous, _active)
    return previous
