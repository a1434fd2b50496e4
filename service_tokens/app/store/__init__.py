"""
Store package for the token service.

Provides a Redis-backed adapter mapping token ids to namespaced keys with
native expiry.
"""

from .redis_store import RedisTokenStore

__all__ = ["RedisTokenStore"]
