"""
Cart use cases.
"""
import logging
from dataclasses import dataclass

from apps.catalog.domain.exceptions import ProductNotFoundError, ProductUnavailableError
from apps.catalog.domain.repositories.product_catalog import ProductCatalog
from shared.application import UseCase, UseCaseResult
from ...domain.entities.cart_item import check_quantity
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.customization import Customization
from ..dtos.cart_dto import AddCartItemDTO, CartDTO, RemoveCartItemDTO, UpdateCartItemDTO

logger = logging.getLogger(__name__)


@dataclass
class GetCartUseCase(UseCase[str, CartDTO]):
    """Return the owner's cart; an owner with no cart gets an empty one."""

    cart_repository: CartRepository

    def execute(self, input_dto: str) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.find_by_owner(input_dto)
        return UseCaseResult.ok(CartDTO.from_entity(cart))


@dataclass
class AddCartItemUseCase(UseCase[AddCartItemDTO, CartDTO]):
    """Use case for adding a product, with optional customization, to a cart."""

    cart_repository: CartRepository
    product_catalog: ProductCatalog

    def execute(self, input_dto: AddCartItemDTO) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.find_by_owner(input_dto.owner_id)

        check_quantity(input_dto.quantity)
        customization = Customization.from_dict(input_dto.customization)

        product = self.product_catalog.find_by_id(input_dto.product_id)
        if product is None:
            raise ProductNotFoundError(str(input_dto.product_id))
        if not product.is_active:
            raise ProductUnavailableError(product.name)

        item = cart.add_item(
            product_id=product.id,
            name=product.name,
            unit_price=product.price,
            quantity=input_dto.quantity,
            image_ref=product.image_ref,
            customization=customization,
        )
        saved_cart = self.cart_repository.save(cart)
        logger.debug("Cart %s: line %s now x%d", cart.owner_id, item.id, item.quantity)

        return UseCaseResult.ok(CartDTO.from_entity(saved_cart))


@dataclass
class UpdateCartItemUseCase(UseCase[UpdateCartItemDTO, CartDTO]):
    """Set a line's quantity; zero or less removes the line."""

    cart_repository: CartRepository

    def execute(self, input_dto: UpdateCartItemDTO) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.find_by_owner(input_dto.owner_id)
        cart.update_quantity(input_dto.line_id, input_dto.quantity)
        saved_cart = self.cart_repository.save(cart)
        return UseCaseResult.ok(CartDTO.from_entity(saved_cart))


@dataclass
class RemoveCartItemUseCase(UseCase[RemoveCartItemDTO, CartDTO]):

    cart_repository: CartRepository

    def execute(self, input_dto: RemoveCartItemDTO) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.find_by_owner(input_dto.owner_id)
        cart.remove_item(input_dto.line_id)
        saved_cart = self.cart_repository.save(cart)
        return UseCaseResult.ok(CartDTO.from_entity(saved_cart))


@dataclass
class ClearCartUseCase(UseCase[str, CartDTO]):

    cart_repository: CartRepository

    def execute(self, input_dto: str) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.find_by_owner(input_dto)
        cart.clear()
        saved_cart = self.cart_repository.save(cart)
        return UseCaseResult.ok(CartDTO.from_entity(saved_cart))
