"""Outbound notifications (e-mail)."""

from .smtp_notification_service import SMTPNotificationService
from .background import BackgroundNotificationService
from . import email_templates

__all__ = ["SMTPNotificationService", "BackgroundNotificationService", "email_templates"]
