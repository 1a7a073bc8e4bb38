"""Shared rate limiter."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from stpaul_crime.config import get_settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=get_settings().rate_limit_enabled,
)


def mutation_rate_limit() -> str:
    """Per-client limit for write endpoints, read from settings on each request."""
    return f"{get_settings().rate_limit_per_minute}/minute"
