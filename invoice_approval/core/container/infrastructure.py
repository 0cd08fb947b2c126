"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console/JSON)
- Database (async SQLAlchemy engine)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from invoice_approval.core.config import settings

if TYPE_CHECKING:
    from invoice_approval.domain.protocols.logger_protocol import LoggerProtocol
    from invoice_approval.infrastructure.persistence.database import Database


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> "Database":
    """Get database manager singleton (app-scoped).

    Only built when the database repository backend is selected.

    Returns:
        Database manager instance.

    Usage:
        db = get_database()
        async with db.get_session() as session:
            ...
    """
    from invoice_approval.infrastructure.persistence.database import Database

    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from invoice_approval.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )

    use_json = env in {"testing", "ci", "production"}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
