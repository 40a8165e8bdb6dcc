"""
Instagram Graph API messaging client.

Two interchangeable clients share one method, ``send(payload) -> message_id``:

    LiveInstagramClient       POSTs to {base_url}/{api_version}/{user_id}/messages
    SimulatedInstagramClient  logs the payload and returns msg_<epoch ms>

``create_client`` picks one from the configuration at startup.
"""

import json
import time
import logging

import httpx

from skills.instagram_config import InstagramConfig
from skills.instagram_errors import ProviderError

logger = logging.getLogger("InstagramClient")


class SimulatedInstagramClient:
    """Stand-in used when no credentials are configured."""

    simulated = True

    def send(self, payload: dict) -> str:
        message_id = f"msg_{int(time.time() * 1000)}"
        logger.info(
            f"[SIMULATION] Would send to {payload['recipient']['id']}: "
            f"{json.dumps(payload['message'], ensure_ascii=False)}"
        )
        return message_id

    def close(self):
        pass


class LiveInstagramClient:
    simulated = False

    def __init__(self, config: InstagramConfig, http_client: httpx.Client | None = None):
        self.config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=config.timeout)

    def send(self, payload: dict) -> str:
        """POST *payload* and return the provider message ID.

        Raises ProviderError with the HTTP status and response body on a
        non-2xx reply, or with the transport error message if the request
        never completed.
        """
        url = self.config.messages_url
        headers = {
            "Authorization": f"Bearer {self.config.access_token}",
            "Content-Type": "application/json",
        }
        logger.info(f"Sending message to {payload['recipient']['id']} via {url}")

        try:
            resp = self._http.post(url, headers=headers, json=payload, timeout=self.config.timeout)
        except httpx.HTTPError as e:
            logger.error(f"Instagram HTTP error: {e}")
            raise ProviderError(str(e) or e.__class__.__name__) from e

        if not resp.is_success:
            body = _response_body(resp)
            logger.error(f"Instagram API error: {resp.status_code} {resp.text[:300]}")
            raise ProviderError(
                f"Request failed with status code {resp.status_code}",
                status_code=resp.status_code,
                body=body,
            )

        data = _response_body(resp)
        message_id = data.get("message_id", "unknown") if isinstance(data, dict) else "unknown"
        logger.info(f"Instagram message sent: message_id={message_id}")
        return message_id

    def close(self):
        if self._owns_client:
            self._http.close()


def _response_body(resp: httpx.Response):
    try:
        return resp.json()
    except ValueError:
        return resp.text


def create_client(config: InstagramConfig, http_client: httpx.Client | None = None):
    """Return a live client when credentials are present, else a simulated one."""
    if config.is_live:
        return LiveInstagramClient(config, http_client=http_client)
    return SimulatedInstagramClient()
