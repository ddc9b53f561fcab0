"""HTML bodies for freelancer application e-mails."""

from html import escape
from typing import Optional

BRAND_NAME = "CustomTee"


def _greeting(first_name: Optional[str]) -> str:
    return f"Hi {escape(first_name)}," if first_name else "Hi there,"


def _layout(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>"
        "<html><body style=\"font-family: Arial, sans-serif; color: #1f2937;\">"
        "<div style=\"max-width: 560px; margin: 0 auto; padding: 24px;\">"
        f"<h2 style=\"color: #111827;\">{escape(title)}</h2>"
        f"{body}"
        f"<p style=\"margin-top: 32px; color: #6b7280;\">The {BRAND_NAME} team</p>"
        "</div></body></html>"
    )


def application_received_html(first_name: Optional[str] = None) -> str:
    """Sent when an application is created or re-opened."""
    return _layout(
        "We received your application",
        f"<p>{_greeting(first_name)}</p>"
        "<p>Thanks for applying to sell your designs on "
        f"{BRAND_NAME}. Our team will review your application and get back "
        "to you by e-mail.</p>",
    )


def application_approved_html(first_name: Optional[str] = None, dashboard_url: str = "") -> str:
    """Sent when an admin approves an application."""
    link = ""
    if dashboard_url:
        link = (
            f"<p><a href=\"{escape(dashboard_url, quote=True)}\" "
            "style=\"background: #4f46e5; color: #ffffff; padding: 10px 18px; "
            "border-radius: 6px; text-decoration: none;\">Open your dashboard</a></p>"
        )
    return _layout(
        "Your freelancer account is verified",
        f"<p>{_greeting(first_name)}</p>"
        "<p>Good news: your freelancer application has been approved. "
        "You can now publish designs to the marketplace.</p>"
        f"{link}",
    )


def application_rejected_html(first_name: Optional[str] = None) -> str:
    """Sent when an admin rejects an application."""
    return _layout(
        "Your freelancer application status",
        f"<p>{_greeting(first_name)}</p>"
        "<p>After reviewing your application we are unable to approve it at "
        "this time. You are welcome to apply again later.</p>",
    )
