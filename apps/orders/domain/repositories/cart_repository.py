"""
Cart repository interface.
"""
from abc import ABC, abstractmethod

from ..entities.cart import Cart


class CartRepository(ABC):
    """Abstract repository for Cart aggregate."""

    @abstractmethod
    def find_by_owner(self, owner_id: str) -> Cart:
        """Return the owner's last saved cart, or a new empty one."""
        pass

    @abstractmethod
    def save(self, cart: Cart) -> Cart:
        """Persist the whole cart under its owner id (last writer wins)."""
        pass

    @abstractmethod
    def find_by_owner_for_update(self, owner_id: str) -> Cart:
        """Like ``find_by_owner``, but lock the stored cart until the transaction ends."""
        pass
