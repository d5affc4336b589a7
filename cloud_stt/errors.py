"""Error taxonomy for transcription calls. ``str(exc)`` is the user-facing text."""
from cloud_stt.constants import ERR_API_MESSAGE, ERR_API_STATUS


class TranscriptionError(Exception):
    """Base for every failure raised by a transcription call."""


class InputError(TranscriptionError):
    """Empty audio, missing API key, or an input WAV that cannot be read."""


class EncodingError(TranscriptionError):
    """The WAV writer could not be created, written or finalized."""


class HeaderError(TranscriptionError):
    """The API key cannot be sent as an HTTP header value."""


class TransportError(TranscriptionError):
    """The request could not be built, sent or completed."""


class ApiError(TranscriptionError):
    """The service answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        reason: str = "",
        from_json: bool = True,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.reason = reason
        self.from_json = from_json
        status = f"{status_code} {reason}".strip()
        template = ERR_API_MESSAGE if from_json else ERR_API_STATUS
        super().__init__(template % (status, message))


class ResponseParseError(TranscriptionError):
    """A success response whose body is not ``{"text": "..."}``."""
