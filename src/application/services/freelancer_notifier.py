"""Best-effort e-mails about freelancer application status changes."""

from application.interfaces import INotificationService
from domain.entities import User
from infrastructure.config import get_logger
from infrastructure.notifications import email_templates

RECEIVED_SUBJECT = "We received your freelancer application"
APPROVED_SUBJECT = "Your freelancer account is verified"
REJECTED_SUBJECT = "Your freelancer application status"


class FreelancerNotifier:
    """
    Composes applicant e-mails and hands them to a notification service.

    Failures are logged and swallowed so they never undo a status change.
    """

    def __init__(self, notification_service: INotificationService, dashboard_url: str = ""):
        self.notification_service = notification_service
        self.dashboard_url = dashboard_url
        self.logger = get_logger(self.__class__.__name__)

    async def application_received(self, user: User) -> None:
        await self._send(
            user,
            RECEIVED_SUBJECT,
            email_templates.application_received_html(user.first_name),
        )

    async def application_approved(self, user: User) -> None:
        await self._send(
            user,
            APPROVED_SUBJECT,
            email_templates.application_approved_html(user.first_name, self.dashboard_url),
        )

    async def application_rejected(self, user: User) -> None:
        await self._send(
            user,
            REJECTED_SUBJECT,
            email_templates.application_rejected_html(user.first_name),
        )

    async def _send(self, user: User, subject: str, html: str) -> None:
        if not user.email:
            return
        try:
            await self.notification_service.send(user.email, subject, html)
        except Exception as e:
            self.logger.warning(f"⚠️ Could not notify {user.email} ('{subject}'): {e}")
