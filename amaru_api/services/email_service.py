"""
Email Service

Sends the registration emails over SMTP. Uses aiosmtplib for async delivery and
Jinja2 for the HTML bodies under ``amaru_api/templates/email``.
"""

import logging
import re
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import aiosmtplib
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from ..config import settings

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"


class EmailService:
    """Service for sending emails via SMTP."""

    def __init__(self, config=None, template_dir: Optional[Path] = None):
        self.config = config or settings
        self.template_env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            autoescape=select_autoescape(["html"]),
        )

    def is_configured(self) -> bool:
        return bool(self.config.MAIL_ENABLED and self.config.MAIL_HOST and self.config.MAIL_FROM)

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send an email via SMTP.

        Returns:
            Dict with 'success' and either 'message_id' or 'error'
        """
        if not self.is_configured():
            return {"success": False, "error": "Email service not configured"}

        message = MIMEMultipart("alternative")
        message["From"] = f"{self.config.MAIL_FROM_NAME} <{self.config.MAIL_FROM}>"
        message["To"] = to_email
        message["Subject"] = subject
        if text_content:
            message.attach(MIMEText(text_content, "plain", "utf-8"))
        message.attach(MIMEText(html_content, "html", "utf-8"))

        try:
            await self._send_via_smtp(message)
        except (aiosmtplib.SMTPException, OSError) as e:
            error_msg = f"Failed to send email to {to_email}: {e}"
            logger.error(error_msg, exc_info=True)
            return {"success": False, "error": error_msg}

        logger.info("Email sent successfully to %s: %s", to_email, subject)
        return {"success": True, "message_id": message.get("Message-ID", "")}

    async def _send_via_smtp(self, message: MIMEMultipart) -> None:
        # implicit TLS and STARTTLS are mutually exclusive
        smtp = aiosmtplib.SMTP(
            hostname=self.config.MAIL_HOST,
            port=self.config.MAIL_PORT,
            use_tls=self.config.MAIL_USE_TLS,
            start_tls=False if self.config.MAIL_USE_TLS else self.config.MAIL_START_TLS,
            timeout=self.config.MAIL_TIMEOUT,
        )
        async with smtp:
            if self.config.MAIL_USER and self.config.MAIL_PASSWORD:
                await smtp.login(self.config.MAIL_USER, self.config.MAIL_PASSWORD)
            await smtp.send_message(message)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> Tuple[str, str]:
        """
        Render email template with context.

        Returns:
            Tuple of (html_content, text_content)
        """
        html_content = self.template_env.get_template(f"{template_name}.html").render(**context)
        try:
            text_content = self.template_env.get_template(f"{template_name}.txt").render(**context)
        except TemplateNotFound:
            text_content = self._html_to_text(html_content)
        return html_content, text_content

    def _html_to_text(self, html_content: str) -> str:
        text = re.sub(r"<(style|head)[^>]*>.*?</\1>", "", html_content, flags=re.S | re.I)
        text = re.sub(r"<[^>]+>", "", text)
        text = text.replace("&amp;", "&").replace("&lt;", "<").replace("&gt;", ">")
        text = text.replace("&quot;", '"').replace("&#39;", "'").replace("&copy;", "©")
        return re.sub(r"\s+", " ", text).strip()


_email_service = None


def get_email_service() -> EmailService:
    """Get singleton email service instance."""
    global _email_service
    if _email_service is None:
        _email_service = EmailService()
    return _email_service
