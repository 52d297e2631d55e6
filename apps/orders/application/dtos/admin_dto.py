"""
Administrative DTOs.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass
class ChangeStatusDTO:
    """DTO for a status transition request."""
    order_id: UUID
    status: str
    expected_version: Optional[int] = None


@dataclass
class ListOrdersDTO:
    status: Optional[str] = None
