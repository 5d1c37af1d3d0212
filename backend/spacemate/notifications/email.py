"""Booking confirmation emails sent over SMTP."""

import asyncio
import logging
import smtplib
from dataclasses import dataclass
from datetime import date
from email.message import EmailMessage
from email.utils import formataddr

from spacemate.config import Settings, settings

logger = logging.getLogger(__name__)

SUBJECT_TEMPLATE = "Booking Confirmation - {property_name}"

BODY_TEMPLATE = (
    "Hi {guest_name},\n\n"
    "Your booking is confirmed. Here are your reservation details:\n\n"
    "- Property: {property_name}\n"
    "- Location: {location}\n"
    "- Check-in: {check_in}\n"
    "- Check-out: {check_out}\n"
    "- Guests: {guests}\n"
    "- Total Amount: {total}\n"
    "- Payment: Pay at arrival (cash)\n\n"
    "You will pay this amount in cash upon arrival. No prepayment required.\n\n"
    "Best regards,\nThe SpaceMate Team"
)


@dataclass(frozen=True)
class BookingConfirmation:
    """Everything the confirmation email needs, captured at booking time."""

    recipient: str
    property_name: str
    location: str
    city: str
    check_in: date
    check_out: date
    total_price: int
    guests: int | None = None
    guest_name: str | None = None


def format_rupees(amount: int) -> str:
    """Format an amount with Indian digit grouping, e.g. ``₹12,34,567``."""
    digits = str(abs(amount))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups) + "," + tail
    sign = "-" if amount < 0 else ""
    return f"{sign}₹{digits}"


def compose_confirmation(confirmation: BookingConfirmation) -> tuple[str, str]:
    """Return the (subject, body) pair for a booking confirmation."""
    location = ", ".join(part for part in (confirmation.location, confirmation.city) if part)
    subject = SUBJECT_TEMPLATE.format(property_name=confirmation.property_name)
    body = BODY_TEMPLATE.format(
        guest_name=confirmation.guest_name or "Guest",
        property_name=confirmation.property_name,
        location=location or "N/A",
        check_in=confirmation.check_in.strftime("%d %B %Y"),
        check_out=confirmation.check_out.strftime("%d %B %Y"),
        guests=confirmation.guests if confirmation.guests is not None else "N/A",
        total=format_rupees(confirmation.total_price),
    )
    return subject, body


class EmailSender:
    """Sends booking emails; never raises to the caller.

    When SMTP is not configured the message is logged and dropped.
    """

    def __init__(self, config: Settings = settings) -> None:
        self._config = config

    def build_message(self, confirmation: BookingConfirmation) -> EmailMessage:
        subject, body = compose_confirmation(confirmation)
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = formataddr((self._config.email_from_name, self._config.smtp_email))
        message["To"] = confirmation.recipient
        message.set_content(body)
        return message

    def _deliver(self, message: EmailMessage) -> None:
        cfg = self._config
        with smtplib.SMTP(cfg.smtp_host, cfg.smtp_port, timeout=cfg.smtp_timeout_seconds) as smtp:
            if cfg.smtp_use_tls:
                smtp.starttls()
            if cfg.smtp_password:
                smtp.login(cfg.smtp_email, cfg.smtp_password)
            smtp.send_message(message)

    async def send_booking_confirmation(self, confirmation: BookingConfirmation) -> bool:
        """Send the confirmation email. Returns True when it was handed to SMTP."""
        if not self._config.email_enabled:
            logger.warning("Email service not configured; skipping confirmation to %s", confirmation.recipient)
            return False

        try:
            message = self.build_message(confirmation)
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError):
            logger.exception("Failed to send booking email to %r", confirmation.recipient)
            return False
        except Exception:
            # Runs as a background task; nothing upstream can handle it.
            logger.exception("Unexpected error composing or sending booking email to %r", confirmation.recipient)
            return False

        logger.info("Booking email sent to %s", confirmation.recipient)
        return True
