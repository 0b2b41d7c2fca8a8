"""Abstract audit log for completed orders.

Defined in the domain layer so checkout never depends on where the
audit trail is written.  The file-backed implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopsim.domain.model.order import Order

LOG_TEMPLATE = (
    "[LOG] -> Order ID: {id} has been successfully checked out "
    "and paid using {label}."
)


def format_log_line(order: Order) -> str:
    """Render the single audit line for *order* (no trailing newline)."""
    return LOG_TEMPLATE.format(id=order.id, label=order.payment_method_label)


class OrderLog(ABC):

    @abstractmethod
    def append(self, order: Order) -> bool:
        """Append one audit line for *order*; return False if it was lost."""
