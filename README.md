# hexabank

A small banking backend organised as ports and adapters. It has three parts:

- **Payments**: create and look up payments. A new payment goes through a fraud check before it is stored. After it is stored, a notification message is published.
- **Fraud checks**: an amount is flagged as fraudulent when it is a Fibonacci number.
- **Notifications**: messages are delivered to a Discord webhook.

The domain code depends only on small `typing.Protocol` interfaces. Storage, fraud checking and message publishing are adapters that you pass in.

## Installation

```
pip install .
```

To install the test tools as well, run `pip install .[test]`.

## Errors

`hexabank.errors` defines `HexabankError` and three subclasses:

- `NotFoundError`, with the message "not found".
- `BadRequestError`, with the message "bad request".
- `InternalError`, with the message "internal error".

Each error takes an optional message that replaces the default.

## Fraud checks

```python
from hexabank.fraud import FraudService, is_fibonacci

is_fibonacci(832040)                # True
is_fibonacci(1000000)               # False
is_fibonacci(-1)                    # False
FraudService().fraud_check(13)      # True
```

`is_fibonacci` tests whether `5n² + 4` or `5n² − 4` is a perfect square. It uses exact integer arithmetic. Negative numbers are never Fibonacci numbers.

## Payments

### The payment entity

`hexabank.payment_model.Payment` is a dataclass with the fields `description`, `amount`, `id` (a `uuid.UUID`) and `created_at` (a timezone-aware UTC `datetime`).

- `Payment.create(description, amount)` makes a payment with a fresh UUID and the current time.
- `Payment.to_dict()` returns the JSON shape. The keys are `id`, `description`, `amount` and `created_at`. The `id` is a string and `created_at` is in ISO 8601 format.

### The payment service

`hexabank.payment_service.PaymentService(payment_repo, fraud_client, producer)` takes three collaborators. Each one is described by a protocol in the same module:

- `PaymentRepository`: `create_payment(payment)` and `get_payment(payment_id)`.
- `FraudClient`: `validate_payment(payment)` returns `True` when the payment is fraudulent.
- `NotificationProducer`: `send(message)` and `close()`.

`create_payment(description, amount)` works in this order:

1. It builds the payment.
2. It asks the fraud client about the payment.
3. It stores the payment.
4. It publishes a message of this form:

   ```
   Payment created: <id>
   Description: <description>
   Amount: <amount>
   ```

It raises one of these errors:

- `BadRequestError` when the payment is flagged as fraudulent. Nothing is stored in that case.
- `InternalError` when the fraud check, the storage step or the publishing step raises.

`get_payment(payment_id)` returns whatever the repository returns and lets the repository's errors pass through.

### SQL storage

`hexabank.payment_repository.SqlPaymentRepository(engine)` stores payments through a SQLAlchemy `Engine`. It uses the `payments` table, which is defined as `payments_table` on the module's `metadata`. The table has the columns `id`, `description`, `amount` and `created_at`.

- `create_payment` inserts a row. Database errors propagate.
- `get_payment` raises `NotFoundError` for an unknown ID and `InternalError` when the database fails.

The repository does not create the table. Call `metadata.create_all(engine)`, or create the table yourself.

### Example

```python
from sqlalchemy import create_engine

from hexabank.fraud import FraudService
from hexabank.payment_repository import SqlPaymentRepository, metadata
from hexabank.payment_service import PaymentService


class LocalFraudClient:
    def __init__(self):
        self._service = FraudService()

    def validate_payment(self, payment):
        return self._service.fraud_check(payment.amount)


class PrintProducer:
    def send(self, message):
        print(message)

    def close(self):
        pass


engine = create_engine("sqlite://")
metadata.create_all(engine)

service = PaymentService(SqlPaymentRepository(engine), LocalFraudClient(), PrintProducer())
payment = service.create_payment("rent", 100)
assert service.get_payment(payment.id) == payment
```

### HTTP API

`hexabank.payment_http.create_app(payment_service)` returns a Flask application. You can also mount the routes on your own app with `PaymentHTTP(payment_service).register_routes(app)`.

`POST /api/v1/payments` takes a JSON body with two fields:

- `description`: a non-empty string.
- `amount`: an integer greater than 0.

It responds as follows:

| Status | When | Body |
| --- | --- | --- |
| `201` | The payment is created. | `{"message": "Payment created successfully", "payment": {...}}` |
| `400` | The body is not JSON or fails validation. | `{"error": ...}` |
| `500` | The service raises any error, including a fraud rejection. | `{"message": "Unable to fullfil payment", "error": ...}` |

`GET /api/v1/payments/<id>` responds as follows:

| Status | When | Body |
| --- | --- | --- |
| `200` | The payment is found. | `{"message": "Payment retrieved successfully", "payment": {...}}` |
| `400` | The ID is not a valid UUID. | `{"error": "invalid payment ID"}` |
| `404` | No payment has that ID. | `{"error": "not found"}` |
| `500` | Any other error occurs. | `{"error": ...}` |

`CreatePaymentPayload.from_json(data)` does the body validation. It raises `ValidationError` when the body is invalid.

## Notifications

```python
from hexabank.discord import DiscordClient
from hexabank.notification import NotificationService

notifier = NotificationService(DiscordClient("https://discord.example.com/api/webhooks/placeholder"))
notifier.send_notification("Payment created")
```

`DiscordClient(webhook_url, timeout=10.0)` posts `{"content": message}` as JSON to the webhook. `send_message` raises `DiscordError` in two cases:

- the request fails.
- the webhook answers with any status other than 204 No Content.

`NotificationService` works with any object that has a `send_message(message)` method (the `MessageSender` protocol). Errors from the sender propagate unchanged. `Notification` is a small frozen dataclass that holds a `message`.

## What is not included

- **No command or server entry point.** The package installs no command. It does not start a web server or connect to a database on its own: you build the engine and the app, and you run the app with any WSGI server.
- **No network adapters for the fraud check or message publishing.** There is no remote fraud-check client and no message-queue producer or consumer. Supply your own objects that meet the `FraudClient` and `NotificationProducer` protocols, for example by wrapping `FraudService` as in the payment example above.
- **No schema migrations.** Create the `payments` table yourself.
- **No metrics endpoint and no trace exporter.** The services only write debug-level log records through `logging`.