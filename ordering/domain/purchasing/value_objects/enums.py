"""Enums для Purchasing bounded context."""

from enum import Enum


class PurchaseOrderStatus(str, Enum):
    """Purchase order lifecycle status.

    State machine:
        (unsubmitted) → SUBMITTED → APPROVED
        (unsubmitted) → SUBMITTED → DECLINED

    APPROVED та DECLINED - terminal, але за замовчуванням aggregate не
    забороняє повторний approve/decline (див. enforce_transitions).
    """

    SUBMITTED = "Submitted"
    """Order поданий, очікує рішення."""

    APPROVED = "Approved"
    """Order схвалений."""

    DECLINED = "Declined"
    """Order відхилений (з причиною)."""
