from .base import BaseASR, extract_transcript
from .errors import ASRError, ConfigurationError, RemoteRecognitionError


def get_asr(provider: str, **kwargs) -> BaseASR:
    """Фабрика ASR провайдеров."""
    if provider == "google":
        from .google import GoogleASR
        return GoogleASR(**kwargs)
    elif provider == "google_rest":
        from .google import GoogleASR
        from .google_rest import GoogleRestClient
        client = GoogleRestClient(api_key=kwargs.pop("api_key", ""))
        return GoogleASR(client=client, **kwargs)
    else:
        raise ValueError(f"Unknown ASR provider: {provider}. Available: google, google_rest")


__all__ = [
    "BaseASR", "extract_transcript", "get_asr",
    "ASRError", "ConfigurationError", "RemoteRecognitionError",
]
