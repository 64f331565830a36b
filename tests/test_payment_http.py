import uuid
from http import HTTPStatus

import pytest

from hexabank.errors import BadRequestError, InternalError, NotFoundError
from hexabank.payment_http import CreatePaymentPayload, ValidationError, create_app
from hexabank.payment_model import Payment


class FakeService:
    def __init__(self, create_error=None, get_error=None):
        self.create_error = create_error
        self.get_error = get_error
        self.payments = {}
        self.create_calls = []

    def create_payment(self, description, amount):
        self.create_calls.append((description, amount))
        if self.create_error is not None:
            raise self.create_error
        payment = Payment.create(description, amount)
        self.payments[payment.id] = payment
        return payment

    def get_payment(self, payment_id):
        if self.get_error is not None:
            raise self.get_error
        try:
            return self.payments[payment_id]
        except KeyError:
            raise NotFoundError() from None


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def client(service):
    return create_app(service).test_client()


def test_payload_from_json():
    payload = CreatePaymentPayload.from_json({"description": "rent", "amount": 5})
    assert payload == CreatePaymentPayload(description="rent", amount=5)


@pytest.mark.parametrize(
    "data",
    [
        {"amount": 5},
        {"description": "", "amount": 5},
        {"description": "rent"},
        {"description": "rent", "amount": 0},
        {"description": "rent", "amount": -3},
        {"description": "rent", "amount": "5"},
        {"description": "rent", "amount": 1.5},
        {"description": "rent", "amount": True},
        {"description": 7, "amount": 5},
        ["rent", 5],
    ],
)
def test_payload_rejects_invalid(data):
    with pytest.raises(ValidationError):
        CreatePaymentPayload.from_json(data)


def test_create_payment_created(client, service):
    response = client.post("/api/v1/payments", json={"description": "rent", "amount": 5})
    assert response.status_code == HTTPStatus.CREATED
    body = response.get_json()
    assert body["message"] == "Payment created successfully"
    assert body["payment"]["description"] == "rent"
    assert body["payment"]["amount"] == 5
    assert service.create_calls == [("rent", 5)]


def test_create_payment_invalid_payload(client, service):
    response = client.post("/api/v1/payments", json={"description": "rent", "amount": -1})
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert "amount" in response.get_json()["error"]
    assert service.create_calls == []


def test_create_payment_malformed_json(client, service):
    response = client.post(
        "/api/v1/payments", data="{not json", content_type="application/json"
    )
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert service.create_calls == []


@pytest.mark.parametrize("error", [BadRequestError(), InternalError()])
def test_create_payment_service_failure(error):
    client = create_app(FakeService(create_error=error)).test_client()
    response = client.post("/api/v1/payments", json={"description": "rent", "amount": 5})
    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    body = response.get_json()
    assert body["message"] == "Unable to fullfil payment"
    assert body["error"] == str(error)


def test_get_payment_round_trip(client):
    created = client.post("/api/v1/payments", json={"description": "rent", "amount": 5})
    payment_json = created.get_json()["payment"]
    response = client.get(f"/api/v1/payments/{payment_json['id']}")
    assert response.status_code == HTTPStatus.OK
    body = response.get_json()
    assert body["message"] == "Payment retrieved successfully"
    assert body["payment"] == payment_json


def test_get_payment_invalid_id(client):
    response = client.get("/api/v1/payments/not-a-uuid")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.get_json() == {"error": "invalid payment ID"}


def test_get_payment_not_found(client):
    response = client.get(f"/api/v1/payments/{uuid.uuid4()}")
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.get_json() == {"error": "not found"}


def test_get_payment_internal_error():
    client = create_app(FakeService(get_error=InternalError())).test_client()
    response = client.get(f"/api/v1/payments/{uuid.uuid4()}")
    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.get_json() == {"error": "internal error"}