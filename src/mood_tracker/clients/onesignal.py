"""OneSignal client for reminder tags."""

from typing import Optional, Protocol

import httpx
from loguru import logger

from ..utils.config import Settings, get_settings


class Notifier(Protocol):
    """Anything that can receive a user tag."""

    def add_tag(self, key: str, value: str) -> bool:
        ...


class NullNotifier:
    """Notifier used when push notifications are not configured."""

    def add_tag(self, key: str, value: str) -> bool:
        logger.debug("Notifications not configured, dropping tag {}={}", key, value)
        return False


class OneSignalClient:
    """
    Tags the user in OneSignal so its servers can schedule reminders.

    The tracker only pushes state; OneSignal owns scheduling and delivery.
    The user is addressed by the ``external_id`` alias.
    """

    BASE_URL = "https://api.onesignal.com"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=30.0)
        return self._client

    @property
    def is_configured(self) -> bool:
        return self.settings.has_notifications

    def add_tag(self, key: str, value: str) -> bool:
        """Set one tag on the user. Returns False if not sent."""
        if not self.is_configured:
            logger.debug("OneSignal not configured, skipping tag {}", key)
            return False

        url = (
            f"{self.BASE_URL}/apps/{self.settings.onesignal_app_id}"
            f"/users/by/external_id/{self.settings.onesignal_user_id}"
        )
        try:
            response = self.client.patch(
                url,
                headers={"Authorization": f"Key {self.settings.onesignal_api_key}"},
                json={"properties": {"tags": {key: value}}},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("OneSignal tag update failed: {}", e)
            return False

        logger.info("OneSignal tag {} set to {}", key, value)
        return True

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
