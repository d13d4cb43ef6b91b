"""External service clients."""

from .onesignal import Notifier, NullNotifier, OneSignalClient

__all__ = ["Notifier", "NullNotifier", "OneSignalClient"]
