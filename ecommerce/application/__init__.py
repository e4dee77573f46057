"""Application layer - services and interfaces."""

from .interfaces import IIdentityContext, INotificationService
from .services import OrderPlacementService

__all__ = [
    # Services
    "OrderPlacementService",
    # Interfaces
    "IIdentityContext",
    "INotificationService",
]
