"""
Orders admin configuration.

Orders are write-once, so the Django admin is read-only except for status
actions, which go through the same use case as the API.
"""
from django.contrib import admin, messages

from shared.domain.exceptions import DomainException
from ..application.dtos import ChangeStatusDTO, CustomOrderDTO, OrderDTO
from ..application.use_cases import ChangeOrderStatusUseCase
from ..domain.value_objects.order_status import OrderStatus
from ..infrastructure.models import CartModel, CustomOrderModel, OrderModel
from ..infrastructure.repositories import DjangoCustomOrderRepository, DjangoOrderRepository


def _status_action(target: OrderStatus):
    def action(modeladmin, request, queryset):
        use_case = ChangeOrderStatusUseCase(
            repository=modeladmin.repository_class(),
            to_dto=modeladmin.dto_class.from_entity,
        )
        changed = 0
        for model in queryset:
            try:
                use_case.execute(ChangeStatusDTO(order_id=model.id, status=target.value))
                changed += 1
            except DomainException as e:
                modeladmin.message_user(request, f"{model.tracking_id}: {e.message}", level=messages.WARNING)
        if changed:
            modeladmin.message_user(request, f"{changed} order(s) marked {target.label.lower()}.")

    action.__name__ = f"mark_{target.value}"
    action.short_description = f"Mark selected as {target.label.lower()}"
    return action


STATUS_ACTIONS = [_status_action(status) for status in OrderStatus if status != OrderStatus.PENDING]


class _ReadOnlyOrderAdmin(admin.ModelAdmin):
    list_filter = ('status', 'created_at')
    ordering = ('-created_at',)
    actions = STATUS_ACTIONS

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(OrderModel)
class OrderAdmin(_ReadOnlyOrderAdmin):
    """Admin configuration for Order model."""
    repository_class = DjangoOrderRepository
    dto_class = OrderDTO
    list_display = ('tracking_id', 'customer_name', 'district', 'status', 'total', 'created_at')
    search_fields = ('tracking_id', 'customer_name', 'phone')


@admin.register(CustomOrderModel)
class CustomOrderAdmin(_ReadOnlyOrderAdmin):
    """Admin configuration for CustomOrder model."""
    repository_class = DjangoCustomOrderRepository
    dto_class = CustomOrderDTO
    list_display = ('tracking_id', 'product_name', 'quantity', 'status', 'total_price', 'created_at')
    search_fields = ('tracking_id', 'customer_name', 'phone', 'product_name')


@admin.register(CartModel)
class CartAdmin(admin.ModelAdmin):
    """Admin configuration for Cart model."""
    list_display = ('owner_id', 'created_at', 'updated_at')
    search_fields = ('owner_id',)
    ordering = ('-updated_at',)
    readonly_fields = ('id', 'owner_id', 'items', 'created_at', 'updated_at')
