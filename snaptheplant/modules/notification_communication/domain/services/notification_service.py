# 📄 File: snaptheplant/modules/notification_communication/domain/services/notification_service.py
# 🧭 Purpose (Layman Explanation):
# Writes and sends the emails users get from us: trial welcome, "your trial ends soon",
# thank-you for subscribing, and the Pro Pack download link.
# 🧪 Purpose (Technical Summary):
# Renders transactional email templates (plain text + HTML) and hands them to the
# configured EmailService. Every method returns the delivery flag and never raises.
# 🔗 Dependencies:
# notification_communication.domain.models.email_message
# 🔄 Connected Modules / Calls From:
# subscription service, payment service, trial sweep, admin test-email endpoint, pro pack endpoint

from datetime import datetime
from enum import Enum
from typing import List

from snaptheplant.modules.notification_communication.domain.models.email_message import (
    EmailMessage,
    EmailService,
    EmailTemplate,
)
from snaptheplant.shared.utils.helpers import add_days
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

PREMIUM_FEATURES = [
    "Unlimited plant identifications",
    "Advanced care tracking",
    "Community sharing capabilities",
]

PRO_PACK_CONTENTS = [
    "Plant identification guide",
    "Seasonal care calendar",
    "Common plant diseases handbook",
    "Plant nutrition guide",
]

SIGN_OFF = "Happy Planting!\nThe SnapThePlant Team"

PREVIEW_TRIAL_DAYS = 3


class PreviewEmailType(str, Enum):
    """Templates an admin can send to themselves for a preview"""
    TRIAL_STARTED = "trial_started"
    TRIAL_ENDING_1DAY = "trial_ending_1day"
    TRIAL_ENDING_2DAYS = "trial_ending_2days"
    SUBSCRIPTION_MONTHLY = "subscription_monthly"
    SUBSCRIPTION_LIFETIME = "subscription_lifetime"
    PRO_PACK_DOWNLOAD = "pro_pack_download"


def _day_word(days: int, capitalize: bool = False) -> str:
    word = "day" if days == 1 else "days"
    return word.capitalize() if capitalize else word


def _text_list(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _html_body(heading: str, paragraphs: List[str], items: List[str] = None, footer: str = "") -> str:
    parts = [
        '<div style="font-family: Arial, sans-serif; line-height: 1.6; color: #333333;">',
        f'<h2 style="color: #4CAF50;">{heading}</h2>',
        "<p>Hello Plant Enthusiast!</p>",
    ]
    parts.extend(f"<p>{paragraph}</p>" for paragraph in paragraphs)
    if items:
        parts.append("<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>")
    if footer:
        parts.append(f"<p>{footer}</p>")
    parts.append(
        '<div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #EEEEEE;">'
        "<p>Happy Planting!<br>The SnapThePlant Team</p></div>"
    )
    parts.append("</div>")
    return "\n".join(parts)


def format_trial_end(trial_end_date: datetime) -> str:
    """e.g. ``Friday, March 7, 2025``"""
    return f"{trial_end_date:%A}, {trial_end_date:%B} {trial_end_date.day}, {trial_end_date.year}"


class NotificationService:
    """Transactional email composer."""

    def __init__(self, email_service: EmailService, subscribe_url: str = "snaptheplant.com/subscribe"):
        self._email = email_service
        self._subscribe_url = subscribe_url

    async def _deliver(self, message: EmailMessage) -> bool:
        delivered = await self._email.send(message)
        if not delivered:
            logger.warning(
                "Email delivery failed",
                template=message.template.value if message.template else None,
            )
        return delivered

    # =========================================================================
    # TEMPLATES
    # =========================================================================

    def render_trial_started(self, to: str, trial_end_date: datetime) -> EmailMessage:
        formatted = format_trial_end(trial_end_date)
        subject = "Welcome to Your SnapThePlant Premium Trial!"
        features = PREMIUM_FEATURES + ["And more!"]
        text = (
            "Hello Plant Enthusiast!\n\n"
            "Your SnapThePlant premium trial has been activated!\n\n"
            "You now have full access to all premium features including:\n"
            f"{_text_list(features)}\n\n"
            f"Your trial will end on {formatted}. Make the most of it by exploring all our premium features!\n\n"
            f"{SIGN_OFF}"
        )
        html = _html_body(
            subject,
            [
                "Your SnapThePlant premium trial has been activated!",
                "You now have full access to all premium features including:",
            ],
            features,
            f"<strong>Your trial will end on {formatted}.</strong> "
            "Make the most of it by exploring all our premium features!",
        )
        return EmailMessage(to=to, subject=subject, text=text, html=html, template=EmailTemplate.TRIAL_STARTED)

    def render_trial_ending(self, to: str, days_remaining: int) -> EmailMessage:
        subject = f"Your SnapThePlant Trial Ends in {days_remaining} {_day_word(days_remaining, capitalize=True)}"
        ending = f"Your SnapThePlant premium trial is ending in {days_remaining} {_day_word(days_remaining)}."
        text = (
            "Hello Plant Enthusiast!\n\n"
            f"{ending}\n\n"
            "Don't miss out on our premium features:\n"
            f"{_text_list(PREMIUM_FEATURES)}\n\n"
            "Upgrade now to keep enjoying these features without interruption!\n\n"
            f"Visit {self._subscribe_url} to continue your premium journey.\n\n"
            f"{SIGN_OFF}"
        )
        html = _html_body(
            f"Your Trial Ends in {days_remaining} {_day_word(days_remaining, capitalize=True)}",
            [ending, "Don't miss out on our premium features:"],
            PREMIUM_FEATURES,
            "Upgrade now to keep enjoying these features without interruption! "
            f"Visit {self._subscribe_url} to continue your premium journey.",
        )
        return EmailMessage(to=to, subject=subject, text=text, html=html, template=EmailTemplate.TRIAL_ENDING)

    def render_subscription_confirmation(self, to: str, monthly: bool) -> EmailMessage:
        subject = "Thank You for Your SnapThePlant Subscription!"
        plan = "Monthly" if monthly else "Lifetime"
        renewal = (
            "Your subscription will automatically renew each month. "
            "You can manage your subscription at any time from your account settings."
            if monthly else
            "Your lifetime subscription never expires, so you can enjoy premium features forever!"
        )
        features = PREMIUM_FEATURES + ["And much more!"]
        text = (
            "Hello Plant Enthusiast!\n\n"
            f"Thank you for subscribing to SnapThePlant Premium {plan}!\n\n"
            "You now have unlimited access to all premium features:\n"
            f"{_text_list(features)}\n\n"
            f"{renewal}\n\n"
            f"{SIGN_OFF}"
        )
        html = _html_body(
            subject,
            [
                f"Thank you for subscribing to SnapThePlant Premium {plan}!",
                "You now have unlimited access to all premium features:",
            ],
            features,
            renewal,
        )
        return EmailMessage(
            to=to, subject=subject, text=text, html=html, template=EmailTemplate.SUBSCRIPTION_CONFIRMATION
        )

    def render_pro_pack(self, to: str, download_link: str) -> EmailMessage:
        subject = "Your SnapThePlant Pro Pack is Ready to Download!"
        text = (
            "Hello Plant Enthusiast!\n\n"
            "Your SnapThePlant Pro Pack is ready for download!\n\n"
            f"Download Link: {download_link}\n\n"
            "The Pro Pack includes:\n"
            f"{_text_list(PRO_PACK_CONTENTS)}\n\n"
            "Thank you for being a premium member!\n\n"
            f"{SIGN_OFF}\n\n"
            "Note: This download link will expire in 24 hours."
        )
        html = _html_body(
            "Your SnapThePlant Pro Pack is Ready!",
            [
                "Your SnapThePlant Pro Pack is ready for download!",
                f'<a href="{download_link}">Download the Pro Pack</a>',
                "The Pro Pack includes:",
            ],
            PRO_PACK_CONTENTS,
            "Thank you for being a premium member! <em>This download link will expire in 24 hours.</em>",
        )
        return EmailMessage(to=to, subject=subject, text=text, html=html, template=EmailTemplate.PRO_PACK_DOWNLOAD)

    # =========================================================================
    # SENDERS
    # =========================================================================

    async def send_trial_started(self, to: str, trial_end_date: datetime) -> bool:
        return await self._deliver(self.render_trial_started(to, trial_end_date))

    async def send_trial_ending(self, to: str, days_remaining: int) -> bool:
        return await self._deliver(self.render_trial_ending(to, days_remaining))

    async def send_subscription_confirmation(self, to: str, monthly: bool) -> bool:
        return await self._deliver(self.render_subscription_confirmation(to, monthly))

    async def send_pro_pack(self, to: str, download_link: str) -> bool:
        return await self._deliver(self.render_pro_pack(to, download_link))

    async def send_test_email(
        self,
        email_type: PreviewEmailType,
        to: str,
        now: datetime,
        download_link: str,
    ) -> bool:
        """Send a sample of one template to ``to``."""
        email_type = PreviewEmailType(email_type)
        if email_type == PreviewEmailType.TRIAL_STARTED:
            return await self.send_trial_started(to, add_days(now, PREVIEW_TRIAL_DAYS))
        if email_type == PreviewEmailType.TRIAL_ENDING_1DAY:
            return await self.send_trial_ending(to, 1)
        if email_type == PreviewEmailType.TRIAL_ENDING_2DAYS:
            return await self.send_trial_ending(to, 2)
        if email_type == PreviewEmailType.SUBSCRIPTION_MONTHLY:
            return await self.send_subscription_confirmation(to, monthly=True)
        if email_type == PreviewEmailType.SUBSCRIPTION_LIFETIME:
            return await self.send_subscription_confirmation(to, monthly=False)
        return await self.send_pro_pack(to, download_link)
