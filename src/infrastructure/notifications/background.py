"""Notification service that defers delivery until after the HTTP response."""

from fastapi import BackgroundTasks

from application.interfaces import INotificationService
from infrastructure.config import get_logger


class BackgroundNotificationService(INotificationService):
    """
    Schedules delivery on FastAPI background tasks.
    
    Delivery errors are logged and dropped: the state change that triggered
    the notification has already been committed.
    """
    
    def __init__(self, background_tasks: BackgroundTasks, delegate: INotificationService):
        self.background_tasks = background_tasks
        self.delegate = delegate
        self.logger = get_logger(self.__class__.__name__)
    
    async def send(self, to: str, subject: str, html: str) -> None:
        self.background_tasks.add_task(self._deliver, to, subject, html)
    
    async def _deliver(self, to: str, subject: str, html: str) -> None:
        try:
            await self.delegate.send(to, subject, html)
        except Exception as e:
            self.logger.warning(f"Notification to {to} failed: {e}")
