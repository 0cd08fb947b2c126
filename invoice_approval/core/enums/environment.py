"""Application environment types.

Used by Settings and the container to pick environment-specific behavior
(log renderer, debug flags).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test runs, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Deployed service
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
