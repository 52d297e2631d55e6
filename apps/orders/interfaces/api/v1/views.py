"""
Orders API v1 views.
"""
from uuid import UUID

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from apps.catalog.infrastructure.repositories import DjangoProductCatalog
from shared.domain.exceptions import ValidationError
from shared.interfaces.pagination import StandardPagination
from ....application.dtos import (
    AddCartItemDTO,
    ChangeStatusDTO,
    CustomOrderDTO,
    ListOrdersDTO,
    OrderDTO,
    PlaceCustomOrderDTO,
    PlaceOrderDTO,
    RemoveCartItemDTO,
    UpdateCartItemDTO,
)
from ....application.use_cases import (
    AddCartItemUseCase,
    ChangeOrderStatusUseCase,
    ClearCartUseCase,
    GetCartUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    PlaceCustomOrderUseCase,
    PlaceOrderUseCase,
    RemoveCartItemUseCase,
    TrackOrderUseCase,
    UpdateCartItemUseCase,
)
from ....infrastructure.repositories import (
    DjangoCartRepository,
    DjangoCustomOrderRepository,
    DjangoOrderRepository,
)
from ...serializers import (
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
    CartSerializer,
    CustomOrderCreateSerializer,
    CustomOrderPlacedSerializer,
    CustomOrderSerializer,
    OrderCreateSerializer,
    OrderFilterSerializer,
    OrderPlacedSerializer,
    OrderSerializer,
    StatusUpdateSerializer,
    TrackingSerializer,
)

IDEMPOTENCY_KEY_MAX_LENGTH = 255


def _idempotency_key(request):
    key = (request.headers.get('Idempotency-Key') or '').strip()
    if len(key) > IDEMPOTENCY_KEY_MAX_LENGTH:
        raise ValidationError(
            f"Idempotency-Key must be at most {IDEMPOTENCY_KEY_MAX_LENGTH} characters.",
            field='idempotency_key',
        )
    return key or None


# Cart

@extend_schema(tags=['Cart'])
class CartView(APIView):
    """Cart endpoint. Carts are addressed by an opaque owner id."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CartSerializer},
        summary="Get a cart",
    )
    def get(self, request, owner_id: str):
        use_case = GetCartUseCase(cart_repository=DjangoCartRepository())
        result = use_case.execute(owner_id)
        return Response(CartSerializer(result.data).data)

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={200: CartSerializer},
        summary="Add item to cart",
    )
    def post(self, request, owner_id: str):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = AddCartItemUseCase(
            cart_repository=DjangoCartRepository(),
            product_catalog=DjangoProductCatalog(),
        )
        input_dto = AddCartItemDTO(owner_id=owner_id, **serializer.validated_data)
        result = use_case.execute(input_dto)

        return Response(CartSerializer(result.data).data, status=status.HTTP_200_OK)

    @extend_schema(
        responses={200: CartSerializer},
        summary="Clear cart",
    )
    def delete(self, request, owner_id: str):
        use_case = ClearCartUseCase(cart_repository=DjangoCartRepository())
        result = use_case.execute(owner_id)
        return Response(CartSerializer(result.data).data)


@extend_schema(tags=['Cart'])
class CartItemView(APIView):
    """Cart line endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CartItemUpdateSerializer,
        responses={200: CartSerializer},
        summary="Update cart item quantity",
    )
    def patch(self, request, owner_id: str, line_id: UUID):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = UpdateCartItemUseCase(cart_repository=DjangoCartRepository())
        input_dto = UpdateCartItemDTO(owner_id=owner_id, line_id=line_id, **serializer.validated_data)
        result = use_case.execute(input_dto)

        return Response(CartSerializer(result.data).data)

    @extend_schema(
        responses={200: CartSerializer},
        summary="Remove item from cart",
    )
    def delete(self, request, owner_id: str, line_id: UUID):
        use_case = RemoveCartItemUseCase(cart_repository=DjangoCartRepository())
        result = use_case.execute(RemoveCartItemDTO(owner_id=owner_id, line_id=line_id))
        return Response(CartSerializer(result.data).data)


# Checkout

@extend_schema(tags=['Orders'])
class OrderCreateView(APIView):
    """Checkout endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=OrderCreateSerializer,
        responses={
            201: OrderPlacedSerializer,
            200: OrderPlacedSerializer,
            409: OpenApiResponse(description="Idempotency-Key already used for another owner's checkout"),
        },
        parameters=[
            OpenApiParameter(
                'Idempotency-Key', OpenApiTypes.STR, OpenApiParameter.HEADER,
                description="Repeat a checkout safely; the first result is returned again.",
            ),
        ],
        summary="Place an order from a cart",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = PlaceOrderUseCase(
            order_repository=DjangoOrderRepository(),
            cart_repository=DjangoCartRepository(),
            product_catalog=DjangoProductCatalog(),
        )
        input_dto = PlaceOrderDTO(idempotency_key=_idempotency_key(request), **serializer.validated_data)
        result = use_case.execute(input_dto)

        return Response(
            OrderPlacedSerializer(result.data).data,
            status=status.HTTP_201_CREATED if result.created else status.HTTP_200_OK,
        )


@extend_schema(tags=['Custom Orders'])
class CustomOrderCreateView(APIView):
    """Custom order endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CustomOrderCreateSerializer,
        responses={201: CustomOrderPlacedSerializer},
        summary="Place a custom order",
    )
    def post(self, request):
        serializer = CustomOrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = PlaceCustomOrderUseCase(
            custom_order_repository=DjangoCustomOrderRepository(),
            product_catalog=DjangoProductCatalog(),
        )
        result = use_case.execute(PlaceCustomOrderDTO(**serializer.validated_data))

        return Response(CustomOrderPlacedSerializer(result.data).data, status=status.HTTP_201_CREATED)


# Tracking

@extend_schema(tags=['Tracking'])
class TrackingView(APIView):
    """Public order tracking. Knowing the tracking id is the only credential."""
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = 'tracking'

    @extend_schema(
        responses={200: TrackingSerializer},
        summary="Track an order or custom order",
    )
    def get(self, request, tracking_id: str):
        use_case = TrackOrderUseCase(
            order_repository=DjangoOrderRepository(),
            custom_order_repository=DjangoCustomOrderRepository(),
        )
        result = use_case.execute(tracking_id)
        return Response(TrackingSerializer(result.data).data)


# Administration

class _AdminOrderViewMixin:
    """Binds admin views to one order kind."""
    permission_classes = [IsAdminUser]
    repository_class = DjangoOrderRepository
    dto_class = OrderDTO
    serializer_class = OrderSerializer

    def _repository(self):
        return self.repository_class()


@extend_schema(tags=['Admin'])
class AdminOrderListView(_AdminOrderViewMixin, APIView):
    """Order list for administrators."""

    @extend_schema(
        parameters=[OrderFilterSerializer],
        responses={200: OrderSerializer(many=True)},
        summary="List orders",
    )
    def get(self, request):
        filters = OrderFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        use_case = ListOrdersUseCase(repository=self._repository(), to_dto=self.dto_class.from_entity)
        result = use_case.execute(ListOrdersDTO(**filters.validated_data))

        paginator = StandardPagination()
        page = paginator.paginate_queryset(result.data, request, view=self)
        serializer = self.serializer_class(page, many=True)
        return paginator.get_paginated_response(serializer.data)


@extend_schema(tags=['Admin'])
class AdminOrderDetailView(_AdminOrderViewMixin, APIView):
    """Order detail for administrators."""

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: UUID):
        use_case = GetOrderUseCase(repository=self._repository(), to_dto=self.dto_class.from_entity)
        result = use_case.execute(order_id)
        return Response(self.serializer_class(result.data).data)


@extend_schema(tags=['Admin'])
class AdminOrderStatusView(_AdminOrderViewMixin, APIView):
    """Order status transitions."""

    @extend_schema(
        request=StatusUpdateSerializer,
        responses={200: OrderSerializer},
        summary="Change order status",
    )
    def patch(self, request, order_id: UUID):
        serializer = StatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = ChangeOrderStatusUseCase(repository=self._repository(), to_dto=self.dto_class.from_entity)
        input_dto = ChangeStatusDTO(order_id=order_id, **serializer.validated_data)
        result = use_case.execute(input_dto)

        return Response(self.serializer_class(result.data).data)


class _AdminCustomOrderViewMixin(_AdminOrderViewMixin):
    repository_class = DjangoCustomOrderRepository
    dto_class = CustomOrderDTO
    serializer_class = CustomOrderSerializer


@extend_schema(tags=['Admin'], responses={200: CustomOrderSerializer(many=True)})
class AdminCustomOrderListView(_AdminCustomOrderViewMixin, AdminOrderListView):
    """Custom order list for administrators."""


@extend_schema(tags=['Admin'], responses={200: CustomOrderSerializer})
class AdminCustomOrderDetailView(_AdminCustomOrderViewMixin, AdminOrderDetailView):
    """Custom order detail for administrators."""


@extend_schema(tags=['Admin'], responses={200: CustomOrderSerializer})
class AdminCustomOrderStatusView(_AdminCustomOrderViewMixin, AdminOrderStatusView):
    """Custom order status transitions."""
