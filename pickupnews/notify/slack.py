import asyncio
import aiohttp
from typing import Optional

from pickupnews.config import CONFIG
from pickupnews.errors import NotificationError
from pickupnews.logging_config import create_logger


class SlackNotifier:
    """Posts messages to a Slack incoming webhook."""

    def __init__(
        self,
        webhook_url: str,
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.webhook_url = webhook_url
        self.session = session
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds or CONFIG.HTTP_TIMEOUT_SECONDS)
        self.logger = create_logger("SlackNotifier")

    async def notify(self, text: str) -> bool:
        """
        Send the text as {"text": ...}. Returns False when the webhook answers
        with a non-200 status; transport failures raise NotificationError.
        """
        payload = {"text": text}
        try:
            if self.session is not None:
                status = await self._post(self.session, payload)
            else:
                async with aiohttp.ClientSession(timeout=self.timeout) as session:
                    status = await self._post(session, payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NotificationError(f"Failed to post to Slack webhook: {e!r}") from e

        if status != 200:
            self.logger.warning(f"Unable to post this url : http status is {status}")
            return False

        self.logger.info("Posted notification to Slack webhook")
        return True

    async def _post(self, session: aiohttp.ClientSession, payload: dict) -> int:
        # json= sets Content-Type: application/json and escapes the message
        async with session.post(self.webhook_url, json=payload) as response:
            await response.read()
            return response.status
