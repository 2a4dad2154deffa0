"""Outbound boundary for user-facing acknowledgements (toasts, alerts)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    title: str
    description: str


class Notifier(ABC):

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Deliver a notification to the user."""
