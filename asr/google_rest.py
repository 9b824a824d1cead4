"""Google Speech-to-Text через REST API (авторизация по API-ключу)"""
import json

import aiohttp

from .errors import ConfigurationError


def _error_message(body: str) -> str:
    """Google отдаёт {"error": {"code", "message", "status"}}; иначе — тело как есть."""
    try:
        return json.loads(body)["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return body


class GoogleRestClient:
    URL = "https://speech.googleapis.com/v1/speech:recognize"

    def __init__(self, api_key: str, timeout: float = 30):
        if not api_key:
            raise ConfigurationError(
                "Google API key is required for the REST provider. "
                "Set GOOGLE_API_KEY in .env or the environment."
            )
        self.api_key = api_key
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.session = None

    async def _get_session(self):
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(timeout=self.timeout)
        return self.session

    async def recognize(self, request: dict) -> list:
        session = await self._get_session()
        async with session.post(self.URL, params={"key": self.api_key}, json=request) as resp:
            if resp.status != 200:
                body = await resp.text()
                raise RuntimeError(f"ASR error {resp.status}: {_error_message(body)[:200]}")
            # Если речи нет, API возвращает {} без "results"
            return [await resp.json()]

    async def close(self):
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None
