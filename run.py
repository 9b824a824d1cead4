#!/usr/bin/env python3
"""
Распознавание аудио-файла через Google Speech-to-Text.

Каталог конфигурации (опционально):
  config.json — {"asr": {"provider": "google", "recognition": {"languageCode": "ru-RU"}}}
  .env        — GOOGLE_APPLICATION_CREDENTIALS / GOOGLE_API_KEY

Запуск:
  python run.py audio.wav
  python run.py audio.wav configs/russian
  python run.py audio.raw configs/russian --full

Коды выхода: 0 — ок, 1 — ошибка запуска/конфигурации, 2 — ошибка сервиса.
"""
import asyncio
import json
import logging
import sys
from pathlib import Path

from asr import get_asr, BaseASR, ConfigurationError, RemoteRecognitionError
from core.audio import read_audio
from core.config import load_config

logger = logging.getLogger("run")

USAGE = """Usage: python run.py <audio_file> [config_dir] [--full]

  audio_file  — WAV (PCM16) или сырой буфер в кодировке из config.json
  config_dir  — каталог с config.json и .env
  --full      — вывести полный ответ сервиса в JSON"""


def parse_args(argv: list[str]) -> tuple[str, str | None, bool] | None:
    """argv без имени скрипта → (audio_file, config_dir, full) или None."""
    full = "--full" in argv
    args = [a for a in argv if a != "--full"]
    if not args or len(args) > 2:
        return None
    return args[0], args[1] if len(args) > 1 else None, full


def build_asr(cfg: dict, sample_rate: int | None = None) -> BaseASR:
    """Создать провайдера из конфига. Частота из WAV важнее конфига."""
    provider = cfg["asr"]["provider"]
    recognition = dict(cfg["asr"].get("recognition") or {})
    if sample_rate:
        recognition["sampleRateHertz"] = sample_rate

    secrets = cfg["secrets"]
    if provider == "google_rest":
        return get_asr(provider, config=recognition, api_key=secrets["google_api_key"])
    return get_asr(provider, config=recognition,
                   credentials_path=secrets["google_credentials"] or None)


async def main(audio_path: str, config_dir: str | None = None, full: bool = False) -> int:
    try:
        cfg = load_config(config_dir)
    except ConfigurationError as e:
        print(e)
        return 1

    logging.basicConfig(
        level=cfg["log_level"],
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )

    path = Path(audio_path)
    if not path.is_file():
        print(f"Error: {path} is not a file")
        return 1
    audio, rate = read_audio(path)

    try:
        asr = build_asr(cfg, rate)
    except (ConfigurationError, ValueError) as e:
        print(e)
        return 1

    logger.info(f"ASR: {cfg['asr']['provider']} | {len(audio)} bytes")
    try:
        if full:
            results = await asr.recognize(audio)
            print(json.dumps(results, ensure_ascii=False, indent=2))
        else:
            print(await asr.recognize_string(audio))
    except ConfigurationError as e:
        print(e)
        return 1
    except RemoteRecognitionError as e:
        logger.error(f"Recognition failed: {e.cause}")
        return 2
    finally:
        await asr.close()
    return 0


def cli(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args is None:
        print(USAGE)
        return 1
    return asyncio.run(main(*args))


if __name__ == "__main__":
    sys.exit(cli())
