"""
Place custom order use case.
"""
import logging
from dataclasses import dataclass, field

from django.db import transaction

from apps.catalog.domain.repositories.product_catalog import ProductCatalog
from shared.application import UseCase, UseCaseResult
from shared.application.event_dispatcher import publish_on_commit
from shared.domain import FieldErrors
from ...domain.entities.cart_item import check_quantity
from ...domain.entities.custom_order import CustomOrder
from ...domain.repositories.custom_order_repository import CustomOrderRepository
from ...domain.value_objects.customer_info import CustomerInfo
from ...domain.value_objects.customization_brief import CustomizationBrief
from ...domain.value_objects.payment_info import PaymentInfo
from ..dtos.custom_order_dto import CustomOrderPlacedDTO, PlaceCustomOrderDTO
from ..settings import OrdersSettings
from .allocation import insert_with_unique_tracking_id

logger = logging.getLogger(__name__)


@dataclass
class PlaceCustomOrderUseCase(UseCase[PlaceCustomOrderDTO, CustomOrderPlacedDTO]):
    """Place a made-to-brief order for one product. Carts are not involved."""

    custom_order_repository: CustomOrderRepository
    product_catalog: ProductCatalog
    options: OrdersSettings = field(default_factory=OrdersSettings.from_django)

    def execute(self, input_dto: PlaceCustomOrderDTO) -> UseCaseResult[CustomOrderPlacedDTO]:
        errors = FieldErrors()

        product = self.product_catalog.find_by_id(input_dto.product_id)
        if product is None or not product.is_active:
            errors.add('product_id', "Product not found or no longer available.")
        if input_dto.quantity is None:
            errors.add('quantity', "Quantity must be at least 1.")
        else:
            errors.collect(check_quantity, input_dto.quantity)

        customer = errors.collect(
            CustomerInfo.create,
            name=input_dto.customer_name,
            phone=input_dto.phone,
            district=input_dto.district,
            address=input_dto.address,
            thana=input_dto.thana,
        )
        brief = errors.collect(
            CustomizationBrief,
            instructions=input_dto.customization_instructions,
            images=tuple(input_dto.customization_images or ()),
            cost=input_dto.customization_cost,
        )

        total_price = None
        if not errors:
            total_price = CustomOrder.price_for(product.price, input_dto.quantity, brief.cost)
        payment = errors.collect(
            PaymentInfo.create,
            method=input_dto.payment_method,
            total=total_price,
            amount=input_dto.payment_amount,
            transaction_id=input_dto.transaction_id,
        )
        errors.raise_if_any("Custom order could not be placed")

        with transaction.atomic():
            custom_order = insert_with_unique_tracking_id(
                self.custom_order_repository,
                lambda tracking_id: CustomOrder.create(
                    tracking_id=tracking_id,
                    customer=customer,
                    payment=payment,
                    product_id=product.id,
                    product_name=product.name,
                    quantity=input_dto.quantity,
                    base_price=product.price,
                    brief=brief,
                ),
                prefix=self.options.custom_tracking_prefix,
                max_attempts=self.options.max_tracking_attempts,
            )
            publish_on_commit(custom_order)

        logger.info(
            "Custom order %s placed for product %s: total %s",
            custom_order.tracking_id, product.id, custom_order.total_price,
        )
        return UseCaseResult.ok(CustomOrderPlacedDTO.from_entity(custom_order), created=True)
