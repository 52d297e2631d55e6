# Value objects
from .order_status import OrderStatus, SUCCESS_PATH, CANCELLABLE
from .tracking_id import TrackingId
from .customization import Customization, canonical_customization
from .customization_brief import CustomizationBrief
from .phone_number import PhoneNumber
from .customer_info import CustomerInfo
from .payment_info import PaymentInfo, PaymentMethod
from .order_item import OrderItem
from .timeline_entry import TimelineEntry

__all__ = [
    'OrderStatus',
    'SUCCESS_PATH',
    'CANCELLABLE',
    'TrackingId',
    'Customization',
    'canonical_customization',
    'CustomizationBrief',
    'PhoneNumber',
    'CustomerInfo',
    'PaymentInfo',
    'PaymentMethod',
    'OrderItem',
    'TimelineEntry',
]
