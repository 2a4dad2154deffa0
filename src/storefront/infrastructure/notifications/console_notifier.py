"""Notifier that prints acknowledgements to the terminal."""

from __future__ import annotations

import click

from storefront.application.notifier import Notification, Notifier


class ConsoleNotifier(Notifier):

    def notify(self, notification: Notification) -> None:
        click.secho(notification.title, bold=True, err=True)
        click.echo(f"  {notification.description}", err=True)
