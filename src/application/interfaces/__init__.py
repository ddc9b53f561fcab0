"""Application interfaces - Port definitions for external services."""

from .notification_service import INotificationService

__all__ = ["INotificationService"]
