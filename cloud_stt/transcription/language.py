"""Language selection: unspecified, auto-detect, or an explicit code."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cloud_stt.constants import LANGUAGE_AUTO


class LanguageMode(Enum):
    UNSPECIFIED = "unspecified"
    AUTO = "auto"
    CODE = "code"


@dataclass(frozen=True)
class Language:
    mode: LanguageMode
    code: str = ""

    @classmethod
    def parse(cls, value: "Optional[str | Language]") -> "Language":
        match value:
            case Language():
                return value
            case None | "":
                return cls(LanguageMode.UNSPECIFIED)
            case str() if value == LANGUAGE_AUTO:
                return cls(LanguageMode.AUTO)
            case str() as code:
                return cls(LanguageMode.CODE, code)
            case _:
                raise TypeError(f"Unsupported language value: {value!r}")

    @property
    def form_value(self) -> Optional[str]:
        """The ``language`` field to send, or None to let the service detect it."""
        match self.mode:
            case LanguageMode.CODE:
                return self.code
            case _:
                return None
