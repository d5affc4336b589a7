"""Entry point — wires Config → OpenAICompatibleTranscriptionClient for a WAV file."""
import argparse
import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence

from rich.logging import RichHandler

from cloud_stt.audio.wav import read_wav
from cloud_stt.config import Config
from cloud_stt.constants import MSG_TRANSCRIPTION_FAILED
from cloud_stt.errors import TranscriptionError
from cloud_stt.transcription.openai_compatible import OpenAICompatibleTranscriptionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Transcribe a 16 kHz mono 16-bit WAV file with an OpenAI-compatible API"
    )
    parser.add_argument("wav_path", type=Path, help="path to the WAV file")
    args = parser.parse_args(argv)

    config = Config.from_env()
    _setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    client = OpenAICompatibleTranscriptionClient.from_config(config)
    try:
        samples = read_wav(args.wav_path)
        text = asyncio.run(client.transcribe(samples))
    except TranscriptionError as exc:
        logger.error(MSG_TRANSCRIPTION_FAILED, exc)
        raise SystemExit(1) from exc

    print(text)


if __name__ == "__main__":
    main()
