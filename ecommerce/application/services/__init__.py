"""Application services."""
from .order_placement_service import OrderPlacementService

__all__ = ["OrderPlacementService"]
