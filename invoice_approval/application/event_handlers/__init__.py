"""Application event handlers (policies reacting to domain events).

Policies are wired manually in the container because they dispatch
commands rather than produce side effects only.
"""

from invoice_approval.application.event_handlers.start_approval_process_policy import (
    ApprovalPolicyError,
    StartApprovalProcessPolicy,
)

__all__ = ["ApprovalPolicyError", "StartApprovalProcessPolicy"]
