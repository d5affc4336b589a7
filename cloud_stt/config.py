from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from cloud_stt.constants import DEFAULT_LANGUAGE, DEFAULT_LOG_LEVEL, DEFAULT_PROVIDER
from cloud_stt.providers import CloudProvider, preset_for


@dataclass(frozen=True)
class Config:
    provider: CloudProvider
    api_key: str
    base_url: str
    model: str
    language: str
    timeout: Optional[float]
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        provider = os.getenv("TRANSCRIPTION_PROVIDER", DEFAULT_PROVIDER).strip().lower()
        api_key = os.getenv("TRANSCRIPTION_API_KEY") or os.getenv("OPENAI_API_KEY")
        base_url = os.getenv("TRANSCRIPTION_BASE_URL") or None
        model = os.getenv("TRANSCRIPTION_MODEL") or None
        language = os.getenv("TRANSCRIPTION_LANGUAGE", DEFAULT_LANGUAGE)
        timeout = os.getenv("TRANSCRIPTION_TIMEOUT") or None
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)

        return cls._validate(
            provider=provider,
            api_key=api_key,
            base_url=base_url,
            model=model,
            language=language.strip(),
            timeout=timeout,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        provider: str,
        api_key: Optional[str],
        base_url: Optional[str],
        model: Optional[str],
        language: str,
        timeout: Optional[str],
        log_level: str,
    ) -> "Config":
        match api_key:
            case None | "":
                raise ValueError("TRANSCRIPTION_API_KEY (or OPENAI_API_KEY) must be set in .env")
            case _:
                pass

        try:
            cloud_provider = CloudProvider(provider)
        except ValueError:
            valid = ", ".join(p.value for p in CloudProvider)
            raise ValueError(
                f"TRANSCRIPTION_PROVIDER must be one of: {valid} (got {provider!r})"
            ) from None

        match timeout:
            case None:
                seconds = None
            case raw:
                try:
                    seconds = float(raw)
                except ValueError:
                    raise ValueError(f"TRANSCRIPTION_TIMEOUT must be a number (got {raw!r})") from None
                if seconds <= 0:
                    raise ValueError("TRANSCRIPTION_TIMEOUT must be positive")

        preset = preset_for(cloud_provider)
        return Config(
            provider=cloud_provider,
            api_key=api_key,
            base_url=base_url or preset.base_url,
            model=model or preset.default_model,
            language=language,
            timeout=seconds,
            log_level=log_level,
        )
