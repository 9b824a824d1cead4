"""Чтение аудио-файлов для распознавания."""
import logging
import wave
from pathlib import Path

logger = logging.getLogger("core.audio")


def load_wav(path: str | Path) -> tuple[bytes, int]:
    """
    WAV (PCM16) → кадры без заголовка и частота из заголовка.
    Returns: (pcm_data, sample_rate)
    """
    with wave.open(str(path), "rb") as wf:
        if wf.getsampwidth() != 2:
            logger.warning(f"{path}: {wf.getsampwidth() * 8}-bit samples, LINEAR16 expects 16-bit")
        rate = wf.getframerate()
        pcm = wf.readframes(wf.getnframes())
    logger.info(f"WAV loaded: {path} ({len(pcm)} bytes @ {rate}Hz)")
    return pcm, rate


def read_audio(path: str | Path) -> tuple[bytes, int | None]:
    """WAV → (PCM, частота из заголовка). Остальное — сырой буфер без частоты."""
    path = Path(path)
    if path.suffix.lower() == ".wav":
        return load_wav(path)
    return path.read_bytes(), None
