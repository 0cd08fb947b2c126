"""Repository dependency factories.

Repositories are app-scoped. The SQLAlchemy implementations open a session
per operation from the shared Database, so one instance serves every
request; the in-memory implementations must be shared to be useful at all.

Backend selection (REPOSITORY_BACKEND):
    - 'memory': InMemoryInvoiceRepository / InMemoryApprovalRepository
    - 'database': SQLAlchemy InvoiceRepository / ApprovalRepository
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from invoice_approval.core.config import settings
from invoice_approval.core.container.infrastructure import get_database

if TYPE_CHECKING:
    from invoice_approval.domain.protocols.approval_repository import (
        ApprovalRepository,
    )
    from invoice_approval.domain.protocols.invoice_repository import (
        InvoiceRepository,
    )


@lru_cache()
def get_invoice_repository() -> "InvoiceRepository":
    """Get invoice repository singleton (app-scoped).

    Returns:
        Repository implementing the InvoiceRepository protocol.

    Raises:
        ValueError: If REPOSITORY_BACKEND is unsupported.
    """
    backend = settings.repository_backend

    if backend == "database":
        from invoice_approval.infrastructure.persistence.repositories import (
            InvoiceRepository,
        )

        return InvoiceRepository(database=get_database())

    elif backend == "memory":
        from invoice_approval.infrastructure.persistence.repositories import (
            InMemoryInvoiceRepository,
        )

        return InMemoryInvoiceRepository()

    else:
        raise ValueError(
            f"Unsupported REPOSITORY_BACKEND: {backend}. "
            f"Supported: 'memory', 'database'"
        )


@lru_cache()
def get_approval_repository() -> "ApprovalRepository":
    """Get approval repository singleton (app-scoped).

    Returns:
        Repository implementing the ApprovalRepository protocol.

    Raises:
        ValueError: If REPOSITORY_BACKEND is unsupported.
    """
    backend = settings.repository_backend

    if backend == "database":
        from invoice_approval.infrastructure.persistence.repositories import (
            ApprovalRepository,
        )

        return ApprovalRepository(database=get_database())

    elif backend == "memory":
        from invoice_approval.infrastructure.persistence.repositories import (
            InMemoryApprovalRepository,
        )

        return InMemoryApprovalRepository()

    else:
        raise ValueError(
            f"Unsupported REPOSITORY_BACKEND: {backend}. "
            f"Supported: 'memory', 'database'"
        )
