"""SMTP notification service for sending HTML e-mails via standard library."""

import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Optional

from application.interfaces import INotificationService
from domain.exceptions import DependencyFailureError
from infrastructure.config import Settings, get_logger, get_settings


class SMTPNotificationService(INotificationService):
    """Concrete implementation of INotificationService over SMTP."""
    
    def __init__(self, settings: Optional[Settings] = None):
        """Initialize SMTP service from settings."""
        self.settings = settings or get_settings()
        self.logger = get_logger(self.__class__.__name__)
    
    @property
    def is_configured(self) -> bool:
        return bool(
            self.settings.smtp_server
            and self.settings.smtp_email
            and self.settings.smtp_password
        )
    
    async def send(self, to: str, subject: str, html: str) -> None:
        """Send an HTML e-mail without blocking the event loop."""
        if not self.is_configured:
            self.logger.warning("SMTP configuration missing. Skipping email to %s.", to)
            return
        
        message = self._build_message(to, subject, html)
        try:
            await asyncio.to_thread(self._deliver, message, to)
        except (smtplib.SMTPException, OSError) as e:
            raise DependencyFailureError(f"Failed to send email to {to}: {e}") from e
        
        self.logger.info(f"Email '{subject}' sent to {to}")
    
    def _build_message(self, to: str, subject: str, html: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = formataddr((self.settings.mail_from_name, self.settings.smtp_email))
        msg["To"] = to
        msg["Subject"] = subject
        if self.settings.mail_reply_to:
            msg["Reply-To"] = self.settings.mail_reply_to
        msg.attach(MIMEText(html, "html", "utf-8"))
        return msg
    
    def _deliver(self, message: MIMEMultipart, to: str) -> None:
        host = self.settings.smtp_server
        port = self.settings.smtp_port
        self.logger.debug(f"Connecting to SMTP server: {host}:{port}...")
        
        # Port 465 speaks TLS from the first byte, other ports upgrade with STARTTLS.
        if port == 465:
            server = smtplib.SMTP_SSL(host, port, timeout=self.settings.smtp_timeout)
        else:
            server = smtplib.SMTP(host, port, timeout=self.settings.smtp_timeout)
        
        try:
            if port != 465:
                server.ehlo()
                server.starttls()
                server.ehlo()
            server.login(self.settings.smtp_email, self.settings.smtp_password)
            server.send_message(message, to_addrs=[to])
        finally:
            server.quit()
