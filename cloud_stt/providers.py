"""Presets for the OpenAI-compatible transcription services we know about."""
from dataclasses import dataclass
from enum import Enum


class CloudProvider(str, Enum):
    OPENAI = "openai"
    GROQ = "groq"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ProviderPreset:
    label: str
    base_url: str
    default_model: str


PRESETS: dict[CloudProvider, ProviderPreset] = {
    CloudProvider.OPENAI: ProviderPreset(
        label="OpenAI Whisper API",
        base_url="https://api.openai.com/v1",
        default_model="whisper-1",
    ),
    CloudProvider.GROQ: ProviderPreset(
        label="Groq Whisper API",
        base_url="https://api.groq.com/openai/v1",
        default_model="whisper-large-v3",
    ),
    # Self-hosted servers (whisper.cpp, faster-whisper-server, ...)
    CloudProvider.CUSTOM: ProviderPreset(
        label="Custom API",
        base_url="http://localhost:8080/v1",
        default_model="whisper-1",
    ),
}


def preset_for(provider: CloudProvider) -> ProviderPreset:
    return PRESETS[provider]
