"""SQL storage for payments."""

from __future__ import annotations

import uuid
from datetime import timezone

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    Uuid,
    insert,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from hexabank.errors import InternalError, NotFoundError
from hexabank.payment_model import Payment

metadata = MetaData()

payments_table = Table(
    "payments",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("description", Text, nullable=False),
    Column("amount", Integer, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


class SqlPaymentRepository:
    """Stores payments in the ``payments`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_payment(self, payment: Payment) -> None:
        """Insert ``payment``; database errors propagate."""
        statement = insert(payments_table).values(
            id=payment.id,
            description=payment.description,
            amount=payment.amount,
            created_at=payment.created_at,
        )
        with self._engine.begin() as conn:
            conn.execute(statement)

    def get_payment(self, payment_id: uuid.UUID) -> Payment:
        """Load a payment; NotFoundError if absent, InternalError on failure."""
        statement = select(payments_table).where(payments_table.c.id == payment_id)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(statement).mappings().first()
        except SQLAlchemyError as exc:
            raise InternalError() from exc

        if row is None:
            raise NotFoundError()

        created_at = row["created_at"]
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Payment(
            id=row["id"],
            description=row["description"],
            amount=row["amount"],
            created_at=created_at,
        )