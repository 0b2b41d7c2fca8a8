"""Payment kinds and their confirmation behavior.

There is no real money movement: confirming a payment only produces a
message for the console.  Each kind maps through ``PAYMENT_METHODS`` to
its label, so no class hierarchy is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from shopsim.domain.model.value_objects import Money


class PaymentKind(Enum):
    CASH = "CASH"
    CARD = "CARD"
    GCASH = "GCASH"


@dataclass(frozen=True)
class PaymentMethod:
    kind: PaymentKind
    label: str

    def confirm(self, amount: Money, notify: Callable[[str], None]) -> None:
        notify(f"Paid {amount} using {self.label}")


PAYMENT_METHODS: dict[PaymentKind, PaymentMethod] = {
    PaymentKind.CASH: PaymentMethod(PaymentKind.CASH, "Cash"),
    PaymentKind.CARD: PaymentMethod(PaymentKind.CARD, "Credit/Debit Card"),
    PaymentKind.GCASH: PaymentMethod(PaymentKind.GCASH, "GCash"),
}

# Menu numbering shown at checkout, in display order.
PAYMENT_MENU: dict[str, PaymentKind] = {
    "1": PaymentKind.CASH,
    "2": PaymentKind.CARD,
    "3": PaymentKind.GCASH,
}


def resolve(kind: PaymentKind) -> PaymentMethod:
    return PAYMENT_METHODS[kind]
