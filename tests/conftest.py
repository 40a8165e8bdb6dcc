import pytest

from skills.instagram_config import InstagramConfig
from skills.instagram_errors import ProviderError


class RecordingClient:
    """Instagram client double that records every payload it is asked to send."""

    def __init__(self, simulated=False, fail_on=()):
        self.simulated = simulated
        self.fail_on = set(fail_on)
        self.sent = []

    def send(self, payload):
        self.sent.append(payload)
        call_number = len(self.sent)
        if call_number in self.fail_on:
            raise ProviderError(
                "Request failed with status code 500",
                status_code=500,
                body={"error": {"message": "boom"}},
            )
        return f"mid.{call_number}"

    def close(self):
        pass


@pytest.fixture
def make_client():
    return RecordingClient


@pytest.fixture
def live_config():
    return InstagramConfig(
        user_id="17841400000000000",
        access_token="EAAtesttoken1234",
        api_version="v22.0",
        base_url="https://graph.instagram.com",
        timeout=5.0,
    )


@pytest.fixture
def simulated_config():
    return InstagramConfig()
