import os
import wave
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


@pytest.fixture
def fake_client():
    """Удалённый клиент распознавания без сети."""
    client = AsyncMock()
    client.recognize.return_value = []
    return client


@pytest.fixture
def no_credentials():
    """Окружение без GOOGLE_* переменных (восстанавливается после теста)."""
    with patch.dict(os.environ):
        os.environ.pop("GOOGLE_APPLICATION_CREDENTIALS", None)
        os.environ.pop("GOOGLE_API_KEY", None)
        yield


@pytest.fixture
def credentials_file(tmp_path):
    path = tmp_path / "service-account.json"
    path.write_text('{"type": "service_account"}', encoding="utf-8")
    return path


@pytest.fixture
def service_account():
    """Разбор ключа сервисного аккаунта без настоящего RSA-ключа."""
    credentials = MagicMock(name="credentials")
    with patch("asr.google.service_account.Credentials.from_service_account_file",
               return_value=credentials) as factory:
        factory.credentials = credentials
        yield factory


@pytest.fixture
def wav_file(tmp_path):
    path = tmp_path / "speech.wav"
    with wave.open(str(path), "w") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(8000)
        wf.writeframes(b"\x01\x00" * 800)
    return path
