"""In-memory WAV encoding for mono 16 kHz float audio."""
import io
import logging
import math
import struct
import wave
from pathlib import Path
from typing import Sequence

from cloud_stt.constants import (
    CHANNELS,
    ERR_WAV_CREATE,
    ERR_WAV_FORMAT,
    ERR_WAV_READ,
    ERR_WAV_WRITE,
    MSG_READING_FILE,
    PCM16_DIVISOR,
    PCM16_MAX,
    PCM16_MIN,
    PCM16_SCALE,
    SAMPLE_RATE,
    SAMPLE_WIDTH_BYTES,
)
from cloud_stt.errors import EncodingError, InputError

logger = logging.getLogger(__name__)


def to_pcm16(sample: float) -> int:
    """Scale a [-1.0, 1.0] sample to int16, clamping out-of-range values."""
    scaled = sample * PCM16_SCALE
    match math.isnan(scaled):
        case True:
            return 0
        case False:
            return int(min(max(scaled, PCM16_MIN), PCM16_MAX))


def encode_wav(samples: Sequence[float]) -> bytes:
    """Encode samples as a mono 16-bit 16 kHz WAV file.

    An empty sequence yields a header-only (44 byte) file.

    Raises:
        EncodingError: if the writer cannot be created, written or finalized.
    """
    buffer = io.BytesIO()
    try:
        frames = struct.pack(f"<{len(samples)}h", *map(to_pcm16, samples))
    except (struct.error, TypeError) as exc:
        raise EncodingError(ERR_WAV_WRITE % exc) from exc
    try:
        with wave.open(buffer, "wb") as wav:
            wav.setnchannels(CHANNELS)
            wav.setsampwidth(SAMPLE_WIDTH_BYTES)
            wav.setframerate(SAMPLE_RATE)
            wav.writeframes(frames)
    except (wave.Error, OSError) as exc:
        raise EncodingError(ERR_WAV_CREATE % exc) from exc
    return buffer.getvalue()


def decode_wav(data: bytes) -> list[float]:
    """Read a mono 16-bit 16 kHz WAV back into float samples.

    Raises:
        InputError: if the data is not a WAV file or has another format.
    """
    try:
        with wave.open(io.BytesIO(data), "rb") as wav:
            params = wav.getparams()
            frames = wav.readframes(params.nframes)
    except (wave.Error, EOFError, struct.error) as exc:
        raise InputError(ERR_WAV_READ % exc) from exc

    found = (params.nchannels, params.framerate, params.sampwidth)
    match found == (CHANNELS, SAMPLE_RATE, SAMPLE_WIDTH_BYTES):
        case True:
            pass
        case False:
            channels, rate, width = found
            raise InputError(
                ERR_WAV_FORMAT
                % (CHANNELS, SAMPLE_RATE, SAMPLE_WIDTH_BYTES * 8, channels, rate, width * 8)
            )

    count = len(frames) // SAMPLE_WIDTH_BYTES
    pcm = struct.unpack(f"<{count}h", frames[: count * SAMPLE_WIDTH_BYTES])
    return [value / PCM16_DIVISOR for value in pcm]


def read_wav(path: Path) -> list[float]:
    logger.debug(MSG_READING_FILE, path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputError(ERR_WAV_READ % exc) from exc
    return decode_wav(data)
