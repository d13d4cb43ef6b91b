"""Tests for the OneSignal tag client."""

import json

import httpx

from mood_tracker.clients import NullNotifier, OneSignalClient
from mood_tracker.utils.config import Settings


def _settings(**overrides) -> Settings:
    values = dict(
        onesignal_app_id="app-123",
        onesignal_api_key="secret",
        onesignal_user_id="me",
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestOneSignalClient:
    """Tests for OneSignalClient.add_tag."""

    def test_not_configured(self):
        client = OneSignalClient(_settings(onesignal_api_key=None))
        assert client.is_configured is False
        assert client.add_tag("reminder_times", "09:00") is False

    def test_sends_tag(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={})

        client = OneSignalClient(
            _settings(),
            client=httpx.Client(transport=httpx.MockTransport(handler)),
        )

        assert client.add_tag("reminder_times", "09:00,14:00") is True

        [request] = requests
        assert request.method == "PATCH"
        assert request.url.path == "/apps/app-123/users/by/external_id/me"
        assert request.headers["Authorization"] == "Key secret"
        assert json.loads(request.content) == {
            "properties": {"tags": {"reminder_times": "09:00,14:00"}}
        }

    def test_http_error_is_not_raised(self):
        client = OneSignalClient(
            _settings(),
            client=httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(500))),
        )
        assert client.add_tag("reminder_times", "09:00") is False


def test_null_notifier():
    assert NullNotifier().add_tag("reminder_times", "09:00") is False
