"""Google Cloud Speech-to-Text ASR (распознавание целого буфера)"""
import base64
import json
import logging
import os
from pathlib import Path
from types import MappingProxyType

from google.cloud import speech
from google.oauth2 import service_account
from google.protobuf import json_format

from .base import BaseASR
from .errors import ConfigurationError, RemoteRecognitionError

logger = logging.getLogger("asr.google")

CREDENTIALS_ENV = "GOOGLE_APPLICATION_CREDENTIALS"

DEFAULT_CONFIG = {
    "sampleRateHertz": 16000,
    "encoding": "LINEAR16",
    "languageCode": "en-US",
}

CREDENTIALS_HELP = (
    "Your google service account key and project environment\n"
    "variables are required. Create it here within your GCP\n"
    "project: https://console.cloud.google.com/apis/credentials\n"
    "Then export it so the app can use it like this:\n"
    f"> export {CREDENTIALS_ENV}=[json file]"
)


def load_credentials(path: str) -> service_account.Credentials:
    """Прочитать JSON-ключ сервисного аккаунта. Любая проблема — ConfigurationError."""
    if not Path(path).is_file():
        raise ConfigurationError(f"Credentials file not found: {path}\n{CREDENTIALS_HELP}")
    try:
        return service_account.Credentials.from_service_account_file(path)
    except (ValueError, OSError) as e:
        raise ConfigurationError(f"Invalid credentials file {path}: {e}\n{CREDENTIALS_HELP}") from e


class GoogleSpeechClient:
    """
    gRPC-клиент Google Speech.
    Принимает запрос в JSON-формате REST API (camelCase, base64),
    возвращает список из одного ответа-словаря.

    Запрос, который не ложится на RecognizeRequest (неизвестное поле,
    неверный enum), — ConfigurationError: до сервиса он не доходит.
    """

    def __init__(self, credentials: service_account.Credentials):
        self.credentials = credentials
        self.client = None

    def _get_client(self):
        # Канал grpc.aio привязан к event loop — создаём при первом вызове
        if self.client is None:
            self.client = speech.SpeechAsyncClient(credentials=self.credentials)
        return self.client

    @staticmethod
    def _to_proto(request: dict) -> speech.RecognizeRequest:
        try:
            return speech.RecognizeRequest.from_json(json.dumps(request))
        except (json_format.ParseError, TypeError) as e:
            raise ConfigurationError(f"Invalid recognition request: {e}") from e

    async def recognize(self, request: dict) -> list:
        proto = self._to_proto(request)
        response = await self._get_client().recognize(request=proto)
        return [speech.RecognizeResponse.to_dict(
            response,
            use_integers_for_enums=False,
            preserving_proto_field_name=False,
        )]

    async def close(self):
        if self.client is not None:
            await self.client.transport.close()
            self.client = None


class GoogleASR(BaseASR):
    """
    Отправляет сырой аудио-буфер в Google Speech.

    config — переопределения поверх DEFAULT_CONFIG (ключи как в REST API:
    sampleRateHertz, encoding, languageCode, ...). Неизвестные ключи
    передаются в API как есть.

    Источник credentials (по приоритету):
      client — готовый клиент с методом recognize(request)
      credentials_path — путь к JSON-ключу сервисного аккаунта
      GOOGLE_APPLICATION_CREDENTIALS из окружения
    Ключ разбирается сразу: отсутствующий или битый — ConfigurationError.
    """

    def __init__(self, config: dict = None, client=None, credentials_path: str = None):
        self.config = MappingProxyType({**DEFAULT_CONFIG, **(config or {})})

        if client is None:
            credentials_path = credentials_path or os.getenv(CREDENTIALS_ENV)
            if not credentials_path:
                raise ConfigurationError(CREDENTIALS_HELP)
            client = GoogleSpeechClient(load_credentials(credentials_path))
        self.client = client

    def build_request(self, audio: bytes) -> dict:
        return {
            "audio": {"content": base64.b64encode(audio).decode("ascii")},
            "config": dict(self.config),
        }

    async def recognize(self, audio: bytes) -> list:
        request = self.build_request(audio)
        logger.debug(f"ASR request: {len(audio)} bytes, "
                     f"{self.config['languageCode']} @ {self.config['sampleRateHertz']}Hz")
        try:
            return await self.client.recognize(request)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.debug(f"ASR error: {e}")
            raise RemoteRecognitionError(e) from e

    async def close(self):
        close = getattr(self.client, "close", None)
        if close is not None:
            await close()
