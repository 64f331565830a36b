"""Payment domain: ports for its dependencies and the payment service."""

from __future__ import annotations

import logging
import uuid
from typing import Protocol

from hexabank.errors import BadRequestError, InternalError
from hexabank.payment_model import Payment

logger = logging.getLogger(__name__)


class FraudClient(Protocol):
    """Checks payments against the fraud service."""

    def validate_payment(self, payment: Payment) -> bool:
        """Return True when ``payment`` is fraudulent."""
        ...


class NotificationProducer(Protocol):
    """Publishes notification messages."""

    def send(self, message: str) -> None:
        """Publish ``message``; raise on failure."""
        ...

    def close(self) -> None:
        """Release the producer's resources."""
        ...


class PaymentRepository(Protocol):
    """Stores and loads payments."""

    def create_payment(self, payment: Payment) -> None:
        """Persist ``payment``."""
        ...

    def get_payment(self, payment_id: uuid.UUID) -> Payment:
        """Load the payment with ``payment_id``; raise NotFoundError if absent."""
        ...


class PaymentService:
    """Creates payments after a fraud check and announces them."""

    name = "payment-service"

    def __init__(
        self,
        payment_repo: PaymentRepository,
        fraud_client: FraudClient,
        producer: NotificationProducer,
    ) -> None:
        self._repo = payment_repo
        self._fraud_client = fraud_client
        self._producer = producer

    def create_payment(self, description: str, amount: int) -> Payment:
        """Create, store and announce a payment.

        Raises BadRequestError when the payment is fraudulent and
        InternalError when any dependency fails.
        """
        payment = Payment.create(description, amount)
        logger.debug(
            "span-create-payment payment.id=%s payment.description=%s payment.amount=%d",
            payment.id,
            description,
            amount,
        )

        try:
            is_fraudulent = self._fraud_client.validate_payment(payment)
        except Exception as exc:
            raise InternalError() from exc

        if is_fraudulent:
            raise BadRequestError()

        try:
            self._repo.create_payment(payment)
        except Exception as exc:
            raise InternalError() from exc

        message = (
            f"Payment created: {payment.id}\n"
            f"Description: {payment.description}\n"
            f"Amount: {payment.amount}"
        )
        try:
            self._producer.send(message)
        except Exception as exc:
            raise InternalError() from exc

        return payment

    def get_payment(self, payment_id: uuid.UUID) -> Payment:
        """Return the stored payment with ``payment_id``."""
        return self._repo.get_payment(payment_id)