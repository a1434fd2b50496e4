"""
Token service for the Access Layer.

Issues, validates and revokes opaque bearer tokens bound to a caller-supplied
id. Each token is backed by a single Redis key whose native expiry is the
token's lifetime:

- app.main: Lifecycle helper that opens the Redis connection and yields a
  ready TokenManager.
- app.store: Redis adapter owning key prefixing and TTL arithmetic.
- app.tokens: Token value object, domain errors and the lifecycle manager.

Design notes:
- Package import must not perform network calls. The Redis client is built
  and closed only inside `open_token_manager`.
- Redis is the single source of truth; nothing is cached in-process.
"""
