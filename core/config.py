"""
Единый загрузчик конфигурации.
Приоритет: config.json → .env каталога → окружение → дефолты
"""
import json
import os
from pathlib import Path
from dotenv import load_dotenv

from asr.errors import ConfigurationError


# Дефолтная конфигурация
DEFAULTS = {
    "log_level": "INFO",

    "asr": {
        "provider": "google",
        # Переопределения поверх DEFAULT_CONFIG провайдера
        # (sampleRateHertz, encoding, languageCode, ...)
        "recognition": {},
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """Рекурсивное слияние: override перезаписывает base."""
    result = base.copy()
    for k, v in override.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def load_config(config_dir: str | Path | None = None) -> dict:
    """
    Загружает полную конфигурацию.

    1. Базовые дефолты
    2. config.json из каталога (если есть)
    3. .env из каталога (не перетирает уже заданные переменные)
    4. Секреты из окружения
    """
    file_config = {}
    if config_dir is not None:
        config_dir = Path(config_dir).resolve()

        env_file = config_dir / ".env"
        if env_file.exists():
            load_dotenv(env_file, override=False)

        config_file = config_dir / "config.json"
        if config_file.exists():
            try:
                file_config = json.loads(config_file.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid {config_file}: {e}") from e

    cfg = _deep_merge(DEFAULTS, file_config)

    # Секреты только из окружения/.env (не хранятся в config.json)
    cfg["secrets"] = {
        "google_credentials": os.getenv("GOOGLE_APPLICATION_CREDENTIALS", ""),
        "google_api_key": os.getenv("GOOGLE_API_KEY", ""),
    }

    cfg["config_dir"] = str(config_dir) if config_dir is not None else ""
    return cfg
