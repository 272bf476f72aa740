from __future__ import annotations

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class MessengerClient:
    """Thin wrapper over the Messenger Send API.

    The page token travels as the ``access_token`` query parameter. An empty
    token is not rejected here; the platform answers with an error status.
    """

    def __init__(
        self,
        *,
        page_token: str,
        api_url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self._page_token = page_token
        self._api_url = api_url
        self._timeout = timeout
        self._session = session or requests.Session()

    def send_text(self, recipient_id: str, text: str) -> requests.Response:
        response = self._session.post(
            self._api_url,
            params={"access_token": self._page_token},
            json={"recipient": {"id": recipient_id}, "message": {"text": text}},
            timeout=self._timeout,
        )
        if not response.ok:
            logger.warning("Send API answered %s for recipient %s", response.status_code, recipient_id)
        return response
