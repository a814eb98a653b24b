"""Simulated card payment capture.

No processor is contacted. Card details are checked for plausibility and a
receipt is issued; the card number itself is never stored.
"""

from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from ...schemas.portal import PaymentDetails
from ..errors import PaymentDeclinedError

logger = logging.getLogger(__name__)

_EXPIRY_PATTERN = re.compile(r"^(0[1-9]|1[0-2])/(\d{2})$")
_ZIP_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")


@dataclass(slots=True)
class PaymentReceipt:
    transaction_id: str
    amount: float
    masked_card: str
    captured_at: datetime


def luhn_valid(number: str) -> bool:
    if not number.isdigit():
        return False
    total = 0
    for index, char in enumerate(reversed(number)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def _card_expired(expiry: str, today: date) -> bool:
    match = _EXPIRY_PATTERN.match(expiry.strip())
    if not match:
        raise PaymentDeclinedError("Expiry date must be in MM/YY format.")
    month, year = int(match.group(1)), 2000 + int(match.group(2))
    return (year, month) < (today.year, today.month)


def capture_payment(details: PaymentDetails, amount: float, *, today: Optional[date] = None) -> PaymentReceipt:
    today = today or date.today()
    number = re.sub(r"[\s-]", "", details.card_number)

    if not 13 <= len(number) <= 19 or not luhn_valid(number):
        logger.warning("Payment declined: invalid card number")
        raise PaymentDeclinedError("Card number is invalid.")
    if _card_expired(details.expiry_date, today):
        logger.warning("Payment declined: card expired")
        raise PaymentDeclinedError("Card has expired.")
    if not re.fullmatch(r"\d{3,4}", details.cvv):
        logger.warning("Payment declined: invalid CVV")
        raise PaymentDeclinedError("CVV must be 3 or 4 digits.")
    if not _ZIP_PATTERN.match(details.zip_code.strip()):
        logger.warning("Payment declined: invalid billing ZIP")
        raise PaymentDeclinedError("Billing ZIP code is invalid.")
    if amount <= 0:
        raise PaymentDeclinedError("Payment amount must be positive.")

    receipt = PaymentReceipt(
        transaction_id=uuid.uuid4().hex,
        amount=round(amount, 2),
        masked_card=f"**** {number[-4:]}",
        captured_at=datetime.now(timezone.utc),
    )
    logger.info("Captured payment %s for %.2f", receipt.transaction_id, receipt.amount)
    return receipt
