"""HTTP API for payments."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from flask import Flask, request

from hexabank.errors import NotFoundError
from hexabank.payment_service import PaymentService


class ValidationError(ValueError):
    """The request payload is malformed or fails validation."""


@dataclass(frozen=True)
class CreatePaymentPayload:
    """Body of a create-payment request."""

    description: str
    amount: int

    @classmethod
    def from_json(cls, data: Any) -> CreatePaymentPayload:
        """Build and validate a payload from decoded JSON."""
        if not isinstance(data, dict):
            raise ValidationError("request body must be a JSON object")

        description = data.get("description", "")
        if not isinstance(description, str):
            raise ValidationError("description must be a string")
        if not description:
            raise ValidationError("description is required")

        amount = data.get("amount", 0)
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValidationError("amount must be an integer")
        if amount == 0:
            raise ValidationError("amount is required")
        if amount < 0:
            raise ValidationError("amount must be greater than 0")

        return cls(description=description, amount=amount)


class PaymentHTTP:
    """Request handlers for the payment endpoints."""

    def __init__(self, payment_service: PaymentService) -> None:
        self._service = payment_service

    def register_routes(self, app: Flask) -> None:
        """Mount the payment endpoints under ``/api/v1``."""
        app.add_url_rule(
            "/api/v1/payments",
            endpoint="create_payment",
            view_func=self.create_payment_handler,
            methods=["POST"],
        )
        app.add_url_rule(
            "/api/v1/payments/<payment_id>",
            endpoint="get_payment",
            view_func=self.get_payment_handler,
            methods=["GET"],
        )

    def create_payment_handler(self):
        """Handle ``POST /api/v1/payments``."""
        data = request.get_json(silent=True)
        if data is None:
            return {"error": "invalid JSON body"}, HTTPStatus.BAD_REQUEST
        try:
            payload = CreatePaymentPayload.from_json(data)
        except ValidationError as exc:
            return {"error": str(exc)}, HTTPStatus.BAD_REQUEST

        try:
            payment = self._service.create_payment(payload.description, payload.amount)
        except Exception as exc:
            return (
                {"message": "Unable to fullfil payment", "error": str(exc)},
                HTTPStatus.INTERNAL_SERVER_ERROR,
            )

        return (
            {"message": "Payment created successfully", "payment": payment.to_dict()},
            HTTPStatus.CREATED,
        )

    def get_payment_handler(self, payment_id: str):
        """Handle ``GET /api/v1/payments/<payment_id>``."""
        try:
            parsed_id = uuid.UUID(payment_id)
        except ValueError:
            return {"error": "invalid payment ID"}, HTTPStatus.BAD_REQUEST

        try:
            payment = self._service.get_payment(parsed_id)
        except NotFoundError as exc:
            return {"error": str(exc)}, HTTPStatus.NOT_FOUND
        except Exception as exc:
            return {"error": str(exc)}, HTTPStatus.INTERNAL_SERVER_ERROR

        return (
            {"message": "Payment retrieved successfully", "payment": payment.to_dict()},
            HTTPStatus.OK,
        )


def create_app(payment_service: PaymentService) -> Flask:
    """Build a Flask application serving the payment API."""
    app = Flask(__name__)
    PaymentHTTP(payment_service).register_routes(app)
    return app