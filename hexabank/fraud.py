"""Fraud detection: a payment is flagged when its amount is a Fibonacci number."""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


def _is_perfect_square(value: int) -> bool:
    if value < 0:
        return False
    root = math.isqrt(value)
    return root * root == value


def is_fibonacci(n: int) -> bool:
    """Return True if ``n`` is a Fibonacci number.

    Uses the identity that ``n`` is Fibonacci exactly when ``5n^2 + 4`` or
    ``5n^2 - 4`` is a perfect square. Negative numbers are never Fibonacci.
    """
    if n < 0:
        return False
    square = 5 * n * n
    return _is_perfect_square(square + 4) or _is_perfect_square(square - 4)


class FraudService:
    """Decides whether a payment amount is fraudulent."""

    name = "fraud-service"

    def fraud_check(self, amount: int) -> bool:
        """Return True when the payment amount is considered fraudulent."""
        logger.debug("fraud-check payment.amount=%d", amount)
        return is_fibonacci(amount)