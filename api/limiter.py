"""Shared rate limiter."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from config import config

RATE_LIMIT = config.rate_limit.limit

limiter = Limiter(
    key_func=get_remote_address,
    enabled=config.rate_limit.enabled,
    default_limits=[RATE_LIMIT],
)
