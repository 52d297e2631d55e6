"""
Place order use case.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal

from django.db import transaction

from apps.catalog.domain.repositories.product_catalog import ProductCatalog
from shared.application import UseCase, UseCaseResult
from shared.application.event_dispatcher import publish_on_commit
from shared.domain import FieldErrors
from shared.domain.exceptions import PersistenceError
from ...domain.entities.cart import Cart
from ...domain.entities.order import Order
from ...domain.exceptions import DuplicateCheckoutError, IdempotencyKeyReusedError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.customer_info import CustomerInfo
from ...domain.value_objects.payment_info import PaymentInfo
from ..dtos.order_dto import OrderPlacedDTO, PlaceOrderDTO
from ..settings import OrdersSettings
from .allocation import insert_with_unique_tracking_id

logger = logging.getLogger(__name__)

NOTES_MAX_LENGTH = 1000


@dataclass
class PlaceOrderUseCase(UseCase[PlaceOrderDTO, OrderPlacedDTO]):
    """Turn the owner's cart into a pending order.

    The cart is re-read under a row lock inside the transaction that inserts
    the order and clears the cart, so two submissions of one cart yield one
    order and a failed insert leaves the cart as it was. ``result.created``
    is False when an earlier order with the same idempotency key is replayed.
    """

    order_repository: OrderRepository
    cart_repository: CartRepository
    product_catalog: ProductCatalog
    options: OrdersSettings = field(default_factory=OrdersSettings.from_django)

    def execute(self, input_dto: PlaceOrderDTO) -> UseCaseResult[OrderPlacedDTO]:
        if input_dto.idempotency_key:
            existing = self.order_repository.find_by_idempotency_key(input_dto.idempotency_key)
            if existing is not None:
                return self._replay(existing, input_dto.owner_id)

        validated, customer, payment = self._validate(input_dto)

        try:
            with transaction.atomic():
                cart = self.cart_repository.find_by_owner_for_update(validated.owner_id)
                if input_dto.idempotency_key:
                    existing = self.order_repository.find_by_idempotency_key(input_dto.idempotency_key)
                    if existing is not None:
                        return self._replay(existing, input_dto.owner_id)
                if cart.is_empty or cart.snapshot() != validated.snapshot():
                    self._reject_changed_cart()

                order = insert_with_unique_tracking_id(
                    self.order_repository,
                    lambda tracking_id: Order.create(
                        tracking_id=tracking_id,
                        customer=customer,
                        payment=payment,
                        items=cart.snapshot(),
                        owner_id=cart.owner_id,
                        idempotency_key=input_dto.idempotency_key or None,
                        notes=(input_dto.notes or "").strip(),
                    ),
                    prefix=self.options.tracking_prefix,
                    max_attempts=self.options.max_tracking_attempts,
                )
                cart.clear()
                self.cart_repository.save(cart)
                publish_on_commit(order)
        except DuplicateCheckoutError:
            existing = self.order_repository.find_by_idempotency_key(input_dto.idempotency_key)
            if existing is None:
                raise PersistenceError()
            return self._replay(existing, input_dto.owner_id)

        logger.info(
            "Order %s placed for %s: %d line(s), total %s",
            order.tracking_id, cart.owner_id, len(order.items), order.total,
        )
        return UseCaseResult.ok(OrderPlacedDTO.from_entity(order), created=True)

    def _replay(self, order: Order, owner_id: str) -> UseCaseResult[OrderPlacedDTO]:
        if order.owner_id != owner_id:
            logger.warning("Idempotency key of order %s reused by owner %s", order.tracking_id, owner_id)
            raise IdempotencyKeyReusedError()
        logger.info("Replaying checkout for idempotency key %s -> %s", order.idempotency_key, order.tracking_id)
        return UseCaseResult.ok(OrderPlacedDTO.from_entity(order), created=False)

    @staticmethod
    def _reject_changed_cart() -> None:
        errors = FieldErrors()
        errors.add('items', "Your cart is empty.")
        errors.raise_if_any("Order could not be placed")

    def _validate(self, input_dto: PlaceOrderDTO):
        """Check every input and report all failures in one ValidationError."""
        errors = FieldErrors()

        cart = errors.collect(self.cart_repository.find_by_owner, input_dto.owner_id)
        customer = errors.collect(
            CustomerInfo.create,
            name=input_dto.customer_name,
            phone=input_dto.phone,
            district=input_dto.district,
            address=input_dto.address,
            thana=input_dto.thana,
        )

        total = Decimal('0')
        if cart is not None:
            if cart.is_empty:
                errors.add('items', "Your cart is empty.")
            else:
                total = cart.total_amount
                self._check_stock(cart, errors)

        payment = errors.collect(
            PaymentInfo.create,
            method=input_dto.payment_method,
            total=total,
            amount=input_dto.payment_amount,
            transaction_id=input_dto.transaction_id,
        )

        if len((input_dto.notes or "").strip()) > NOTES_MAX_LENGTH:
            errors.add('notes', f"Notes must be at most {NOTES_MAX_LENGTH} characters.")

        errors.raise_if_any("Order could not be placed")
        return cart, customer, payment

    def _check_stock(self, cart: Cart, errors: FieldErrors) -> None:
        """Best-effort availability check. Nothing is reserved."""
        requested = cart.quantities_by_product()
        products = self.product_catalog.find_by_ids(requested.keys())
        names = {item.product_id: item.name for item in cart.items}

        for product_id, quantity in requested.items():
            product = products.get(product_id)
            if product is None or not product.is_active:
                errors.add('items', f"'{names[product_id]}' is no longer available.")
            elif not product.stock.covers(quantity):
                errors.add(
                    'items',
                    f"Only {product.stock.quantity} of '{product.name}' left in stock.",
                )
