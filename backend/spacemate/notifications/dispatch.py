"""Notifier interface used by the booking service, and its FastAPI adapter."""

from typing import Protocol

from fastapi import BackgroundTasks

from spacemate.notifications.email import BookingConfirmation, EmailSender


class Notifier(Protocol):
    """Receives confirmed bookings. Must return quickly; delivery happens later."""

    def booking_confirmed(self, confirmation: BookingConfirmation) -> None: ...


class BackgroundNotifier:
    """Queue confirmation emails to run after the response has been sent."""

    def __init__(self, background_tasks: BackgroundTasks, sender: EmailSender) -> None:
        self._background_tasks = background_tasks
        self._sender = sender

    def booking_confirmed(self, confirmation: BookingConfirmation) -> None:
        self._background_tasks.add_task(self._sender.send_booking_confirmation, confirmation)
