"""TranscriptionClient — abstract base for backends that turn float samples into text."""
from abc import ABC, abstractmethod
from typing import Sequence


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe(self, audio: Sequence[float]) -> str:
        """Convert mono 16 kHz float samples to text. Raises TranscriptionError on failure."""
        ...
