"""
SMTP delivery of registration codes.

When no SMTP host is configured the sender runs in dev mode and only logs
that a message would have been sent.
"""

import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from shared.config import Settings
from shared.exceptions import ExternalServiceError
from shared.privacy import redact_email

logger = logging.getLogger(__name__)


class SmtpMailSender:
    """Sends registration code emails over SMTP with TLS/SSL."""

    def __init__(
        self,
        *,
        smtp_host: Optional[str] = None,
        smtp_port: int = 587,
        smtp_user: Optional[str] = None,
        smtp_password: Optional[str] = None,
        smtp_use_tls: bool = True,
        from_email: Optional[str] = None,
        from_name: str = "Identity Backend",
        timeout: float = 30,
    ) -> None:
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_user = smtp_user
        self.smtp_password = smtp_password
        self.smtp_use_tls = smtp_use_tls
        self.from_email = from_email or smtp_user
        self.from_name = from_name
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpMailSender":
        return cls(
            smtp_host=settings.smtp_host,
            smtp_port=settings.smtp_port,
            smtp_user=settings.smtp_user,
            smtp_password=settings.smtp_password,
            smtp_use_tls=settings.smtp_use_tls,
            from_email=settings.mail_from,
            from_name=settings.mail_from_name,
        )

    @property
    def is_configured(self) -> bool:
        """Check if email sending is properly configured."""
        return bool(self.smtp_host and self.from_email)

    async def send_registration_code(self, email: str, code: str) -> None:
        subject = "Your registration code"
        text_body = (
            f"Your registration code is {code}.\n\n"
            "Enter it on the signup page to confirm your email address. "
            "If you did not request it, ignore this message."
        )
        html_body = (
            "<p>Your registration code is</p>"
            f"<p style=\"font-size:24px;letter-spacing:4px\"><strong>{code}</strong></p>"
            "<p>Enter it on the signup page to confirm your email address. "
            "If you did not request it, ignore this message.</p>"
        )
        await asyncio.to_thread(self._send_email, email, subject, html_body, text_body)

    def _build_message(
        self, to_email: str, subject: str, html_body: str, text_body: str
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self.from_name} <{self.from_email}>"
        msg["To"] = to_email
        msg.attach(MIMEText(text_body, "plain"))
        msg.attach(MIMEText(html_body, "html"))
        return msg

    def _send_email(self, to_email: str, subject: str, html_body: str, text_body: str) -> None:
        """
        Send an email via SMTP.

        Raises:
            ExternalServiceError: On any SMTP, TLS, network or address encoding failure
        """
        if not self.is_configured:
            # Dev mode: the code itself is not logged
            logger.info("Mail not configured; skipped %r to %s", subject, redact_email(to_email))
            return

        msg = self._build_message(to_email, subject, html_body, text_body)
        context = ssl.create_default_context()

        try:
            if self.smtp_use_tls:
                with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout) as server:
                    server.starttls(context=context)
                    if self.smtp_user and self.smtp_password:
                        server.login(self.smtp_user, self.smtp_password)
                    server.sendmail(self.from_email, to_email, msg.as_string())
            else:
                with smtplib.SMTP_SSL(
                    self.smtp_host, self.smtp_port, context=context, timeout=self.timeout
                ) as server:
                    if self.smtp_user and self.smtp_password:
                        server.login(self.smtp_user, self.smtp_password)
                    server.sendmail(self.from_email, to_email, msg.as_string())
        except (smtplib.SMTPException, ssl.SSLError, OSError, UnicodeError) as e:
            raise ExternalServiceError(
                f"Failed to send mail to {redact_email(to_email)}: {e}",
                service="smtp",
                code="MAIL_DELIVERY_FAILED",
                details={"error_type": type(e).__name__},
            ) from e

        logger.info("Sent %r to %s", subject, redact_email(to_email))
