"""OpenAICompatibleTranscriptionClient — any ``/audio/transcriptions`` endpoint over httpx.

Works with OpenAI, Groq and self-hosted Whisper servers. Each call owns its
``httpx.AsyncClient`` and closes it before returning, so concurrent calls
share nothing.
"""
import json
import logging
from typing import Optional, Sequence

import httpx

from cloud_stt.audio.wav import encode_wav
from cloud_stt.config import Config
from cloud_stt.constants import (
    AUDIO_FILENAME,
    AUDIO_MEDIA_TYPE,
    AUTH_HEADER,
    AUTH_SCHEME,
    ERR_HTTP_CLIENT,
    ERR_HTTP_REQUEST,
    ERR_INVALID_HEADER,
    ERR_NO_API_KEY,
    ERR_NO_AUDIO,
    ERR_PARSE_RESPONSE,
    ERR_READ_ERROR_BODY,
    FORM_FILE,
    FORM_LANGUAGE,
    FORM_MODEL,
    MSG_API_FAILED,
    MSG_ENCODED,
    MSG_RESULT,
    MSG_TRANSCRIBING,
    REQUEST_TIMEOUT,
    SAMPLE_RATE,
    TRANSCRIPTIONS_PATH,
)
from cloud_stt.errors import (
    ApiError,
    HeaderError,
    InputError,
    ResponseParseError,
    TransportError,
)
from cloud_stt.providers import CloudProvider, preset_for
from cloud_stt.transcription.client import TranscriptionClient
from cloud_stt.transcription.language import Language

logger = logging.getLogger(__name__)

LanguageArg = Optional[str | Language]


def transcription_url(base_url: str) -> str:
    return base_url.rstrip("/") + TRANSCRIPTIONS_PATH


def bearer_headers(api_key: str) -> dict[str, str]:
    """``Authorization`` header for the key.

    Only tab and visible ASCII (0x20-0x7E) are accepted. Non-ASCII keys are
    rejected too, since httpx encodes header values as ASCII.

    Raises:
        HeaderError: if the key holds any other character.
    """
    match all(c == "\t" or " " <= c <= "~" for c in api_key):
        case True:
            return {AUTH_HEADER: f"{AUTH_SCHEME} {api_key}"}
        case False:
            raise HeaderError(ERR_INVALID_HEADER)


def build_form(model: str, language: LanguageArg = None) -> dict[str, str]:
    """Non-file multipart fields. ``language`` is left out for auto-detection."""
    form = {FORM_MODEL: model}
    match Language.parse(language).form_value:
        case None:
            pass
        case code:
            form[FORM_LANGUAGE] = code
    return form


def _error_message(body: str) -> Optional[str]:
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        return None
    match payload:
        case {"error": {"message": str() as message}}:
            return message
        case _:
            return None


def _parse_text(body: bytes) -> str:
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise ResponseParseError(ERR_PARSE_RESPONSE % exc) from exc
    match payload:
        case {"text": str() as text}:
            return text
        case _:
            raise ResponseParseError(ERR_PARSE_RESPONSE % "expected a JSON object with a string `text` field")


async def _api_error(response: httpx.Response) -> ApiError:
    try:
        await response.aread()
        body = response.text
    except httpx.HTTPError:
        body = ERR_READ_ERROR_BODY

    match _error_message(body):
        case None:
            return ApiError(response.status_code, body, response.reason_phrase, from_json=False)
        case message:
            return ApiError(response.status_code, message, response.reason_phrase)


async def _interpret(response: httpx.Response) -> str:
    match response.is_success:
        case False:
            error = await _api_error(response)
            logger.warning(MSG_API_FAILED, response.status_code)
            raise error
        case True:
            try:
                await response.aread()
            except httpx.HTTPError as exc:
                raise TransportError(ERR_HTTP_REQUEST % exc) from exc
            text = _parse_text(response.content)
            logger.debug(MSG_RESULT, text)
            return text


async def transcribe(
    audio: Sequence[float],
    api_key: str,
    base_url: str,
    model: str,
    language: LanguageArg = None,
    *,
    timeout: Optional[float] = REQUEST_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Transcribe mono 16 kHz float samples with an OpenAI-compatible API.

    Args:
        audio: Samples in [-1.0, 1.0]; out-of-range values are clamped.
        api_key: Sent as ``Authorization: Bearer <api_key>``.
        base_url: API root, e.g. ``https://api.openai.com/v1``.
        model: Model name, e.g. ``whisper-1``.
        language: Language code, ``"auto"``/``""``/None to let the service
            detect it, or a ``Language``.
        timeout: httpx timeout in seconds; None waits indefinitely.
        transport: Optional httpx transport (tests use ``httpx.MockTransport``).

    Returns:
        The ``text`` field of the response, verbatim.

    Raises:
        InputError, EncodingError, HeaderError, TransportError, ApiError,
        ResponseParseError (all TranscriptionError subclasses).
    """
    match len(audio):
        case 0:
            raise InputError(ERR_NO_AUDIO)
        case _:
            pass

    match api_key:
        case None | "":
            raise InputError(ERR_NO_API_KEY)
        case _:
            pass

    url = transcription_url(base_url)
    logger.debug(MSG_TRANSCRIBING, len(audio), len(audio) / SAMPLE_RATE, model, url)

    wav = encode_wav(audio)
    logger.debug(MSG_ENCODED, len(wav))

    files = {FORM_FILE: (AUDIO_FILENAME, wav, AUDIO_MEDIA_TYPE)}
    data = build_form(model, language)
    headers = bearer_headers(api_key)

    try:
        client = httpx.AsyncClient(
            headers=headers,
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )
    except (OSError, ValueError) as exc:
        raise TransportError(ERR_HTTP_CLIENT % exc) from exc

    async with client:
        try:
            request = client.build_request("POST", url, data=data, files=files)
            response = await client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(ERR_HTTP_REQUEST % exc) from exc
        try:
            return await _interpret(response)
        finally:
            await response.aclose()


class OpenAICompatibleTranscriptionClient(TranscriptionClient):

    def __init__(
        self,
        api_key: str,
        base_url: str = preset_for(CloudProvider.OPENAI).base_url,
        model: str = preset_for(CloudProvider.OPENAI).default_model,
        language: LanguageArg = None,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._model = model
        self._language = Language.parse(language)
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "OpenAICompatibleTranscriptionClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            model=config.model,
            language=config.language,
            timeout=config.timeout,
            transport=transport,
        )

    async def transcribe(self, audio: Sequence[float]) -> str:
        return await transcribe(
            audio,
            self._api_key,
            self._base_url,
            self._model,
            self._language,
            timeout=self._timeout,
            transport=self._transport,
        )
