"""Email service using SendGrid."""

import logging
from html import escape

from python_http_client.exceptions import ForbiddenError, HTTPError, UnauthorizedError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from techstock.config import settings
from techstock.exceptions import EmailAuthenticationError, EmailTransportError

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending transactional emails via SendGrid."""

    @staticmethod
    def is_configured() -> bool:
        """Whether a SendGrid API key is available."""
        return bool(settings.sendgrid_api_key)

    @staticmethod
    def _send_email(
        to_email: str,
        subject: str,
        html_content: str,
        reply_to: str | None = None,
    ) -> None:
        """Send email via SendGrid.

        Raises:
            EmailAuthenticationError: SendGrid rejected the API key.
            EmailTransportError: Any other delivery failure, or no API key.
        """
        if not EmailService.is_configured():
            raise EmailTransportError("Email service is not configured")

        message = Mail(
            from_email=(settings.email_from_address, settings.email_from_name),
            to_emails=to_email,
            subject=subject,
            html_content=html_content,
        )
        if reply_to:
            message.reply_to = reply_to

        try:
            sg = SendGridAPIClient(settings.sendgrid_api_key)
            response = sg.send(message)
        except (UnauthorizedError, ForbiddenError) as exc:
            logger.error(f"SendGrid rejected credentials (status {exc.status_code})")
            raise EmailAuthenticationError() from exc
        except (HTTPError, OSError) as exc:
            logger.exception(f"Failed to send email to {to_email}")
            raise EmailTransportError() from exc

        logger.info(f"Email sent to {to_email}, status: {response.status_code}")
        if response.status_code not in (200, 201, 202):
            raise EmailTransportError(f"Unexpected SendGrid status {response.status_code}")

    @classmethod
    def send_password_reset_email(cls, email: str, token: str) -> None:
        """Send password reset link with the token as a path segment."""
        reset_url = f"{settings.frontend_url}/reset-password/{token}"
        expires_minutes = settings.reset_token_expire_minutes
        html = f"""
        <h2>Reset Your Password</h2>
        <p>You are receiving this because you (or someone else) requested a password
        reset for your TechStock account.</p>
        <p>Click the link below, or paste it into your browser, to complete the process:</p>
        <p><a href="{reset_url}">{reset_url}</a></p>
        <p>This link expires in {expires_minutes} minutes.</p>
        <p>If you didn't request this, you can ignore this email and your password
        will remain unchanged.</p>
        """
        cls._send_email(email, "TechStock Password Reset", html)

    @classmethod
    def send_contact_message(cls, name: str, email: str, message: str) -> None:
        """Forward a contact form submission to the store inbox."""
        html = f"""
        <h3>New Contact Form Submission</h3>
        <p><strong>Name:</strong> {escape(name)}</p>
        <p><strong>Email:</strong> {escape(email)}</p>
        <p><strong>Message:</strong></p>
        <p>{escape(message)}</p>
        """
        cls._send_email(
            settings.contact_inbox_address,
            f"New Contact Form Submission from {name}",
            html,
            reply_to=email,
        )
