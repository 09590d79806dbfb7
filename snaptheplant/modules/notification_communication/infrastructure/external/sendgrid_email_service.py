# 📄 File: snaptheplant/modules/notification_communication/infrastructure/external/sendgrid_email_service.py
# 🧭 Purpose (Layman Explanation):
# Actually sends our emails through SendGrid, an email delivery company.
# 🧪 Purpose (Technical Summary):
# EmailService adapter over the official sendgrid client. The blocking client call runs in
# a worker thread; any failure (missing key, HTTP error, network error) is logged and
# reported as False so callers never see email errors.
# 🔗 Dependencies:
# sendgrid, asyncio
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.core.container (wiring), notification_service.py

import asyncio
from typing import Optional

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from snaptheplant.modules.notification_communication.domain.models.email_message import (
    EmailMessage,
    EmailService,
)
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FROM_EMAIL = "noreply@snaptheplant.com"


class SendGridEmailService(EmailService):
    """SendGrid-backed email delivery."""

    def __init__(self, api_key: Optional[str], from_email: str = DEFAULT_FROM_EMAIL):
        self._from_email = from_email
        self._client: Optional[SendGridAPIClient] = SendGridAPIClient(api_key) if api_key else None
        if self._client is None:
            logger.warning("SENDGRID_API_KEY is not set. Email functionality will not work.")

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def _build_mail(self, message: EmailMessage) -> Mail:
        return Mail(
            from_email=message.from_email or self._from_email,
            to_emails=message.to,
            subject=message.subject,
            plain_text_content=message.text,
            html_content=message.html,
        )

    async def send(self, message: EmailMessage) -> bool:
        if self._client is None:
            logger.warning("Email not sent: SENDGRID_API_KEY is not set", subject=message.subject)
            return False

        try:
            response = await asyncio.to_thread(self._client.send, self._build_mail(message))
        except Exception as e:
            # Delivery failures must never reach the caller
            logger.error(f"SendGrid email error: {e}", subject=message.subject, exc_info=True)
            return False

        accepted = 200 <= response.status_code < 300
        if accepted:
            logger.info("Email sent", subject=message.subject, template=getattr(message.template, "value", None))
        else:
            logger.warning("SendGrid returned non-success status", status_code=response.status_code)
        return accepted
