from collections.abc import Mapping
from typing import Any

from oneshot.core.presenter import field_or_unknown


class PutLexiconView:
    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        return [f"Added lexicon {field_or_unknown(payload, 'Name')}."]


class SynthesizeSpeechView:
    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        return [
            f"Saved {field_or_unknown(payload, 'BytesWritten')} bytes of "
            f"{field_or_unknown(payload, 'ContentType')} audio to "
            f"{field_or_unknown(payload, 'Destination')}."
        ]
