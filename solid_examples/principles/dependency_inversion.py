"""Dependency Inversion Principle (DIP).

High-level modules depend on abstractions (the protocols below), and concrete
databases, mailers and payment processors are passed in. The ServiceRegistry
is used only where the implementation is chosen by name at runtime.
"""
from __future__ import annotations

import asyncio
import logging
import secrets
from datetime import datetime, timezone
from typing import Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from ..display import HEADING
from ..registry import ServiceRegistry

logger = logging.getLogger(__name__)

OrderStatus = Literal["pending", "paid", "shipped", "delivered", "cancelled"]


def random_token() -> str:
    return secrets.token_hex(6)


# Violates DIP: UserServiceBad builds its own MySQL dependency.
class MySQLDatabaseBad:
    def connect(self) -> None:
        logger.info("Connecting to MySQL database")

    def save(self, data: Any) -> None:
        logger.info("Saving data to MySQL: %s", data)

    def find(self, record_id: str) -> dict[str, Any]:
        logger.info("Finding data in MySQL with id: %s", record_id)
        return {"id": record_id, "data": "some data"}


class UserServiceBad:
    def __init__(self) -> None:
        self.database = MySQLDatabaseBad()

    def create_user(self, user_data: dict[str, Any]) -> None:
        self.database.connect()
        self.database.save(user_data)

    def get_user(self, user_id: str) -> dict[str, Any]:
        self.database.connect()
        return self.database.find(user_id)


@runtime_checkable
class Database(Protocol):
    async def connect(self) -> None: ...

    async def disconnect(self) -> None: ...

    async def save(self, collection: str, data: dict[str, Any]) -> str: ...

    async def find_by_id(self, collection: str, record_id: str) -> dict[str, Any] | None: ...

    async def update(self, collection: str, record_id: str, data: dict[str, Any]) -> None: ...

    async def delete(self, collection: str, record_id: str) -> None: ...


class InMemoryDatabase:
    """Database stand-in that keeps collections in dicts and narrates each call."""

    engine = "In-memory"
    container = "collection"

    def __init__(self) -> None:
        self.connected = False
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    async def connect(self) -> None:
        logger.info("Connecting to %s database", self.engine)
        self.connected = True

    async def disconnect(self) -> None:
        logger.info("Disconnecting from %s database", self.engine)
        self.connected = False

    async def save(self, collection: str, data: dict[str, Any]) -> str:
        logger.info("Saving to %s %s %s: %s", self.engine, self.container, collection, data)
        record_id = str(data.get("id") or random_token())
        self._collections.setdefault(collection, {})[record_id] = {**data, "id": record_id}
        return record_id

    async def find_by_id(self, collection: str, record_id: str) -> dict[str, Any] | None:
        logger.info("Finding in %s %s %s with id: %s", self.engine, self.container, collection, record_id)
        record = self._collections.get(collection, {}).get(record_id)
        return dict(record) if record is not None else None

    async def update(self, collection: str, record_id: str, data: dict[str, Any]) -> None:
        logger.info("Updating %s %s %s id %s: %s", self.engine, self.container, collection, record_id, data)
        record = self._collections.get(collection, {}).get(record_id)
        if record is not None:
            record.update(data)

    async def delete(self, collection: str, record_id: str) -> None:
        logger.info("Deleting from %s %s %s id: %s", self.engine, self.container, collection, record_id)
        self._collections.get(collection, {}).pop(record_id, None)


class MySQLDatabase(InMemoryDatabase):
    engine = "MySQL"
    container = "table"


class MongoDatabase(InMemoryDatabase):
    engine = "MongoDB"
    container = "collection"


class PostgreSQLDatabase(InMemoryDatabase):
    engine = "PostgreSQL"
    container = "table"


class User(BaseModel):
    id: str | None = None
    name: str
    email: str
    created_at: datetime | None = None


class UserService:
    """User CRUD against whatever Database it is given."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def create_user(self, name: str, email: str) -> User:
        user = User(name=name, email=email, created_at=datetime.now(timezone.utc))
        await self.database.connect()
        try:
            user_id = await self.database.save("users", user.model_dump(exclude_none=True))
        finally:
            await self.database.disconnect()
        return user.model_copy(update={"id": user_id})

    async def get_user(self, user_id: str) -> User | None:
        await self.database.connect()
        try:
            data = await self.database.find_by_id("users", user_id)
        finally:
            await self.database.disconnect()
        return User.model_validate(data) if data is not None else None

    async def update_user(self, user_id: str, **changes: Any) -> None:
        await self.database.connect()
        try:
            await self.database.update("users", user_id, changes)
        finally:
            await self.database.disconnect()

    async def delete_user(self, user_id: str) -> None:
        await self.database.connect()
        try:
            await self.database.delete("users", user_id)
        finally:
            await self.database.disconnect()


@runtime_checkable
class EmailService(Protocol):
    async def send_email(self, to: str, subject: str, body: str) -> None: ...


class SMTPEmailService:
    def __init__(self, latency: float = 0.1) -> None:
        self.latency = latency

    async def send_email(self, to: str, subject: str, body: str) -> None:
        logger.info("Sending email via SMTP to %s: %s", to, subject)
        await asyncio.sleep(self.latency)


class SendGridEmailService:
    def __init__(self, latency: float = 0.1) -> None:
        self.latency = latency

    async def send_email(self, to: str, subject: str, body: str) -> None:
        logger.info("Sending email via SendGrid to %s: %s", to, subject)
        await asyncio.sleep(self.latency)


class AWSEmailService:
    def __init__(self, latency: float = 0.1) -> None:
        self.latency = latency

    async def send_email(self, to: str, subject: str, body: str) -> None:
        logger.info("Sending email via AWS SES to %s: %s", to, subject)
        await asyncio.sleep(self.latency)


class SentEmail(BaseModel):
    to: str
    subject: str
    body: str


class MockEmailService:
    """Records emails instead of sending them."""

    def __init__(self) -> None:
        self._sent: list[SentEmail] = []

    async def send_email(self, to: str, subject: str, body: str) -> None:
        logger.info("Mock: Email would be sent to %s: %s", to, subject)
        self._sent.append(SentEmail(to=to, subject=subject, body=body))

    def get_sent_emails(self) -> list[SentEmail]:
        return list(self._sent)

    def clear_sent_emails(self) -> None:
        self._sent = []


class OrderItem(BaseModel):
    name: str
    price: float


class Order(BaseModel):
    id: str
    user_id: str
    items: list[OrderItem]
    total: float
    status: OrderStatus = "pending"
    transaction_id: str | None = None
    refund_id: str | None = None


class NotificationService:
    """User notifications delivered through the injected EmailService."""

    def __init__(self, email_service: EmailService) -> None:
        self.email_service = email_service

    async def send_welcome_notification(self, user: User) -> None:
        subject = "Welcome to our platform!"
        body = f"Hello {user.name}, welcome to our amazing platform!"
        await self.email_service.send_email(user.email, subject, body)

    async def send_password_reset_notification(self, user: User, reset_token: str) -> None:
        subject = "Password Reset Request"
        body = f"Hi {user.name}, click here to reset your password: /reset?token={reset_token}"
        await self.email_service.send_email(user.email, subject, body)

    async def send_order_confirmation(self, user: User, order: Order) -> None:
        subject = "Order Confirmation"
        items = "\n".join(f"- {item.name}: ${item.price:.2f}" for item in order.items)
        body = (
            f"Hi {user.name},\n\n"
            f"Your order {order.id} has been confirmed!\n\n"
            f"Items:\n{items}\n\n"
            f"Total: ${order.total:.2f}\n\n"
            "Thank you for your purchase!"
        )
        await self.email_service.send_email(user.email, subject, body)


class PaymentResult(BaseModel):
    success: bool
    transaction_id: str
    message: str


class RefundResult(BaseModel):
    success: bool
    refund_id: str
    message: str


@runtime_checkable
class PaymentProcessor(Protocol):
    async def process_payment(self, amount: float, currency: str, card_token: str) -> PaymentResult: ...

    async def refund_payment(self, transaction_id: str, amount: float | None = None) -> RefundResult: ...


def _refund_label(amount: float | None) -> str:
    return f"${amount:.2f}" if amount else "full amount"


class StripePaymentProcessor:
    def __init__(self, latency: float = 0.2) -> None:
        self.latency = latency

    async def process_payment(self, amount: float, currency: str, card_token: str) -> PaymentResult:
        logger.info("Processing $%.2f %s payment via Stripe", amount, currency)
        await asyncio.sleep(self.latency)
        return PaymentResult(
            success=True,
            transaction_id=f"stripe_{random_token()}",
            message="Payment processed successfully via Stripe",
        )

    async def refund_payment(self, transaction_id: str, amount: float | None = None) -> RefundResult:
        logger.info("Refunding %s for transaction %s via Stripe", _refund_label(amount), transaction_id)
        await asyncio.sleep(self.latency)
        return RefundResult(
            success=True,
            refund_id=f"stripe_refund_{random_token()}",
            message="Refund processed successfully via Stripe",
        )


class PayPalPaymentProcessor:
    def __init__(self, latency: float = 0.3) -> None:
        self.latency = latency

    async def process_payment(self, amount: float, currency: str, card_token: str) -> PaymentResult:
        logger.info("Processing $%.2f %s payment via PayPal", amount, currency)
        await asyncio.sleep(self.latency)
        return PaymentResult(
            success=True,
            transaction_id=f"paypal_{random_token()}",
            message="Payment processed successfully via PayPal",
        )

    async def refund_payment(self, transaction_id: str, amount: float | None = None) -> RefundResult:
        logger.info("Refunding %s for transaction %s via PayPal", _refund_label(amount), transaction_id)
        await asyncio.sleep(self.latency)
        return RefundResult(
            success=True,
            refund_id=f"paypal_refund_{random_token()}",
            message="Refund processed successfully via PayPal",
        )


class MockPaymentProcessor:
    """Approves everything and keeps a record of what it was asked to do."""

    def __init__(self) -> None:
        self._transactions: list[PaymentResult] = []
        self._refunds: list[RefundResult] = []

    async def process_payment(self, amount: float, currency: str, card_token: str) -> PaymentResult:
        logger.info("Mock: Processing $%.2f %s payment", amount, currency)
        result = PaymentResult(
            success=True,
            transaction_id=f"mock_{random_token()}",
            message="Mock payment processed",
        )
        self._transactions.append(result)
        return result

    async def refund_payment(self, transaction_id: str, amount: float | None = None) -> RefundResult:
        logger.info("Mock: Refunding %s for %s", _refund_label(amount), transaction_id)
        result = RefundResult(
            success=True,
            refund_id=f"mock_refund_{random_token()}",
            message="Mock refund processed",
        )
        self._refunds.append(result)
        return result

    def get_transactions(self) -> list[PaymentResult]:
        return list(self._transactions)

    def get_refunds(self) -> list[RefundResult]:
        return list(self._refunds)


class OrderNotFoundError(LookupError):
    def __init__(self, order_id: str) -> None:
        self.order_id = order_id
        super().__init__(f"Order '{order_id}' not found")


class OrderService:
    """Order workflow that only knows the Database, PaymentProcessor and notifier abstractions."""

    def __init__(
        self,
        database: Database,
        payment_processor: PaymentProcessor,
        notification_service: NotificationService,
    ) -> None:
        self.database = database
        self.payment_processor = payment_processor
        self.notification_service = notification_service

    async def create_order(self, user_id: str, items: list[OrderItem]) -> Order:
        order = Order(
            id=f"order_{random_token()}",
            user_id=user_id,
            items=items,
            total=round(sum(item.price for item in items), 2),
        )
        await self.database.connect()
        try:
            await self.database.save("orders", order.model_dump(exclude_none=True))
        finally:
            await self.database.disconnect()
        return order

    async def get_order(self, order_id: str) -> Order | None:
        await self.database.connect()
        try:
            data = await self.database.find_by_id("orders", order_id)
        finally:
            await self.database.disconnect()
        return Order.model_validate(data) if data is not None else None

    async def process_order_payment(self, order_id: str, card_token: str) -> bool:
        """Charge the order total and confirm by email.

        Raises:
            OrderNotFoundError: If no order has ``order_id``
        """
        order = await self.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        try:
            result = await self.payment_processor.process_payment(order.total, "USD", card_token)
        except Exception:
            logger.exception("Payment processing failed for order %s", order_id)
            return False
        if not result.success:
            logger.warning("Payment declined for order %s: %s", order_id, result.message)
            return False

        await self._update_order(order_id, status="paid", transaction_id=result.transaction_id)

        user = await self._get_user_by_id(order.user_id)
        if user is not None:
            await self.notification_service.send_order_confirmation(user, order)
        return True

    async def refund_order(self, order_id: str, transaction_id: str) -> bool:
        try:
            result = await self.payment_processor.refund_payment(transaction_id)
        except Exception:
            logger.exception("Refund processing failed for order %s", order_id)
            return False
        if not result.success:
            logger.warning("Refund declined for order %s: %s", order_id, result.message)
            return False

        await self._update_order(order_id, status="cancelled", refund_id=result.refund_id)
        return True

    async def _update_order(self, order_id: str, **changes: Any) -> None:
        await self.database.connect()
        try:
            await self.database.update("orders", order_id, changes)
        finally:
            await self.database.disconnect()

    async def _get_user_by_id(self, user_id: str) -> User | None:
        await self.database.connect()
        try:
            data = await self.database.find_by_id("users", user_id)
        finally:
            await self.database.disconnect()
        return User.model_validate(data) if data is not None else None


DATABASE_KEYS = ("mysql-db", "mongo-db", "postgres-db")
EMAIL_KEYS = ("smtp-email", "sendgrid-email", "aws-email", "mock-email")
PAYMENT_KEYS = ("stripe-payment", "paypal-payment", "mock-payment")


def build_registry(latency_scale: float = 1.0, *, strict: bool = False) -> ServiceRegistry:
    """Register every stand-in implementation under its well-known key."""
    registry = ServiceRegistry(strict=strict)

    registry.register("mysql-db", MySQLDatabase())
    registry.register("mongo-db", MongoDatabase())
    registry.register("postgres-db", PostgreSQLDatabase())

    registry.register("smtp-email", SMTPEmailService(latency=0.1 * latency_scale))
    registry.register("sendgrid-email", SendGridEmailService(latency=0.1 * latency_scale))
    registry.register("aws-email", AWSEmailService(latency=0.1 * latency_scale))
    registry.register("mock-email", MockEmailService())

    registry.register("stripe-payment", StripePaymentProcessor(latency=0.2 * latency_scale))
    registry.register("paypal-payment", PayPalPaymentProcessor(latency=0.3 * latency_scale))
    registry.register("mock-payment", MockPaymentProcessor())

    return registry


async def demonstrate_dip(
    registry: ServiceRegistry | None = None,
    *,
    database: str = "mongo-db",
    email: str = "mock-email",
    payment: str = "mock-payment",
    latency_scale: float = 1.0,
) -> None:
    logger.info("Dependency Inversion Principle", extra=HEADING)
    if registry is None:
        registry = build_registry(latency_scale)

    logger.info("--- Without DIP ---")
    UserServiceBad().create_user({"name": "John Doe", "email": "john@example.com"})

    logger.info("Database Implementation Switching", extra=HEADING)
    for key in DATABASE_KEYS:
        user_service = UserService(registry.get_typed(key, Database))
        user = await user_service.create_user("John Doe", "john@example.com")
        logger.info("Created user with %s: %s", key, user.id)

    logger.info("Email Service Implementation Switching", extra=HEADING)
    for key in EMAIL_KEYS[:3]:
        notifications = NotificationService(registry.get_typed(key, EmailService))
        await notifications.send_welcome_notification(
            User(id="1", name="Jane Doe", email="jane@example.com")
        )

    logger.info("Payment Processor Implementation Switching", extra=HEADING)
    for key in PAYMENT_KEYS[:2]:
        processor = registry.get_typed(key, PaymentProcessor)
        result = await processor.process_payment(99.99, "USD", "test-token")
        logger.info("%s result: %s", key, result.message)

    logger.info("Full Application Example", extra=HEADING)
    app_database = registry.get_typed(database, Database)
    email_service = registry.get_typed(email, EmailService)
    payment_processor = registry.get_typed(payment, PaymentProcessor)

    user_service = UserService(app_database)
    customer = await user_service.create_user("Ada Lovelace", "ada@example.com")
    order_service = OrderService(
        app_database,
        payment_processor,
        NotificationService(email_service),
    )

    order = await order_service.create_order(
        customer.id or "",
        [OrderItem(name="Widget A", price=29.99), OrderItem(name="Widget B", price=19.99)],
    )
    logger.info("Created order %s (total $%.2f)", order.id, order.total)

    paid = await order_service.process_order_payment(order.id, "test-card-token")
    logger.info("Payment processed: %s", paid)

    logger.info("Testing Benefits", extra=HEADING)
    if isinstance(email_service, MockEmailService):
        for sent in email_service.get_sent_emails():
            logger.info("Mock email sent to %s: %s", sent.to, sent.subject)
    if isinstance(payment_processor, MockPaymentProcessor):
        for transaction in payment_processor.get_transactions():
            logger.info("Mock payment transaction: %s", transaction.transaction_id)
