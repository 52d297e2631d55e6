"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import (
    AdminCustomOrderDetailView,
    AdminCustomOrderListView,
    AdminCustomOrderStatusView,
    AdminOrderDetailView,
    AdminOrderListView,
    AdminOrderStatusView,
    CartItemView,
    CartView,
    CustomOrderCreateView,
    OrderCreateView,
    TrackingView,
)

urlpatterns = [
    # Cart
    path('carts/<str:owner_id>/', CartView.as_view(), name='cart'),
    path('carts/<str:owner_id>/items/<uuid:line_id>/', CartItemView.as_view(), name='cart-item'),

    # Checkout
    path('orders/', OrderCreateView.as_view(), name='order-create'),
    path('custom-orders/', CustomOrderCreateView.as_view(), name='custom-order-create'),

    # Tracking
    path('track/<str:tracking_id>/', TrackingView.as_view(), name='track'),

    # Administration
    path('admin/orders/', AdminOrderListView.as_view(), name='admin-order-list'),
    path('admin/orders/<uuid:order_id>/', AdminOrderDetailView.as_view(), name='admin-order-detail'),
    path('admin/orders/<uuid:order_id>/status/', AdminOrderStatusView.as_view(), name='admin-order-status'),
    path('admin/custom-orders/', AdminCustomOrderListView.as_view(), name='admin-custom-order-list'),
    path(
        'admin/custom-orders/<uuid:order_id>/',
        AdminCustomOrderDetailView.as_view(),
        name='admin-custom-order-detail',
    ),
    path(
        'admin/custom-orders/<uuid:order_id>/status/',
        AdminCustomOrderStatusView.as_view(),
        name='admin-custom-order-status',
    ),
]
