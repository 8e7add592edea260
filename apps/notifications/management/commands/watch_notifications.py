import time

from django.conf import settings
from django.core.management.base import BaseCommand

from apps.notifications.client import NotificationFeedClient

class Command(BaseCommand):
    help = "Poll the admin notification feed and print an alert when new notifications arrive"

    def add_arguments(self, parser):
        parser.add_argument("--base-url", default="http://localhost:8000")
        parser.add_argument("--token", required=True, help="Access token of an admin account")
        parser.add_argument(
            "--interval",
            type=float,
            default=getattr(settings, "NOTIFICATION_POLL_SECONDS", 30),
            help="Seconds between polls",
        )
        parser.add_argument("--once", action="store_true", help="Fetch the feed once and exit")

    def handle(self, *args, **options):
        client = NotificationFeedClient(
            options["base_url"],
            token=options["token"],
            poll_interval=options["interval"],
            on_alert=lambda message: self.stdout.write(self.style.SUCCESS(message)),
        )

        if options["once"]:
            client.poll(notify=False)
            self._print_feed(client.notifications)
            return

        client.start()
        self._print_feed(client.notifications)
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            self.stdout.write("Stopping.")
        finally:
            client.stop()

    def _print_feed(self, notifications):
        if not notifications:
            self.stdout.write(self.style.WARNING("No notifications"))
            return
        for notification in notifications:
            marker = " " if notification.get("isRead") else "*"
            self.stdout.write(f"{marker} [{notification.get('type')}] {notification.get('message')}")
