"""Базовый интерфейс ASR для всей платформы"""
from abc import ABC, abstractmethod


def extract_transcript(results) -> str:
    """
    Лучшая гипотеза из ответа распознавания:
    results[0]["results"][0]["alternatives"][0]["transcript"].
    Если по пути чего-то нет — пустая строка.
    """
    if not results:
        return ""
    segments = results[0].get("results") or []
    if not segments:
        return ""
    alternatives = segments[0].get("alternatives") or []
    if not alternatives:
        return ""
    return alternatives[0].get("transcript", "")


class BaseASR(ABC):
    @abstractmethod
    async def recognize(self, audio: bytes) -> list:
        """
        Распознать речь из буфера.

        Returns:
            [
                {
                    "results": [
                        {"alternatives": [{"transcript": "...", "confidence": 0.95}]}
                    ]
                }
            ]
        """
        pass

    async def recognize_string(self, audio: bytes) -> str:
        """Распознать и вернуть только текст (или "")"""
        results = await self.recognize(audio)
        return extract_transcript(results)

    @abstractmethod
    async def close(self):
        pass
