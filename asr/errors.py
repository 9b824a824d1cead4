"""Ошибки ASR-провайдеров"""


class ASRError(Exception):
    pass


class ConfigurationError(ASRError):
    """Провайдер не может быть создан: нет ключа, файла credentials и т.п."""


class RemoteRecognitionError(ASRError):
    """Удалённый сервис распознавания вернул ошибку. Оригинал — в .cause"""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Remote recognition failed: {cause}")
