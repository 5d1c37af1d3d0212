"""Booking notifications: email composition, SMTP delivery, dispatch."""

from spacemate.notifications.dispatch import BackgroundNotifier, Notifier
from spacemate.notifications.email import BookingConfirmation, EmailSender

__all__ = [
    "BackgroundNotifier",
    "BookingConfirmation",
    "EmailSender",
    "Notifier",
]
