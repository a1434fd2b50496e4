"""
Shared utilities for the Access Layer token service.

This package aggregates the cross-cutting building blocks consumed by the
service package:

- config: Service configuration via pydantic-settings
- logging: Structured logging with request correlation
- errors: Canonical error types and responses

Do not import from service_* packages into shared/.
"""
