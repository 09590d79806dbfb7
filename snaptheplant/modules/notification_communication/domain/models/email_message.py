# 📄 File: snaptheplant/modules/notification_communication/domain/models/email_message.py
# 🧭 Purpose (Layman Explanation):
# The pieces of an email we send: who it goes to, the subject, and the plain and HTML bodies.
# 🧪 Purpose (Technical Summary):
# Immutable outbound email value object plus the EmailService contract implemented by the
# SendGrid adapter and by test fakes. Implementations report failure as False, never raise.
# 🔗 Dependencies:
# dataclasses, abc
# 🔄 Connected Modules / Calls From:
# notification_service.py, sendgrid_email_service.py, tests

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EmailTemplate(str, Enum):
    """Transactional emails the service knows how to render"""
    TRIAL_STARTED = "trial_started"
    TRIAL_ENDING = "trial_ending"
    SUBSCRIPTION_CONFIRMATION = "subscription_confirmation"
    PRO_PACK_DOWNLOAD = "pro_pack_download"


@dataclass(frozen=True)
class EmailMessage:
    """Rendered email ready for delivery."""
    to: str
    subject: str
    text: str
    html: str
    template: Optional[EmailTemplate] = None
    from_email: Optional[str] = None


class EmailService(ABC):
    """Delivery channel for transactional email."""

    @abstractmethod
    async def send(self, message: EmailMessage) -> bool:
        """
        Deliver one message.

        Returns:
            bool: True if the provider accepted it; False on any failure
        """

    async def close(self) -> None:
        return None
