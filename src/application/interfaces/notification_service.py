"""Notification service interface for dependency inversion."""

from abc import ABC, abstractmethod


class INotificationService(ABC):
    """
    Abstract interface for outbound e-mail notifications.
    
    Implementations may raise on transport failure. Callers treat delivery
    as best-effort and must not let a failure undo their state change.
    """
    
    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> None:
        """
        Send an HTML message.
        
        Args:
            to: Recipient e-mail address
            subject: Message subject
            html: HTML body
        """
        pass
