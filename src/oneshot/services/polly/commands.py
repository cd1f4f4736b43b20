from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape

from oneshot.core.errors import ErrorKind, ServiceError
from oneshot.core.models import BaseCommand, BinaryStream
from oneshot.core.persister import output_path
from oneshot.services.polly.views import PutLexiconView, SynthesizeSpeechView

DEFAULT_VOICE = "Joanna"

LEXICON_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<lexicon version="1.0"
    xmlns="http://www.w3.org/2005/01/pronunciation-lexicon"
    xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
    xsi:schemaLocation="http://www.w3.org/2005/01/pronunciation-lexicon
        http://www.w3.org/TR/2007/CR-pronunciation-lexicon-20071212/pls.xsd"
    alphabet="ipa" xml:lang="en-US">
    <lexeme><grapheme>{grapheme}</grapheme><alias>{alias}</alias></lexeme>
</lexicon>"""


class AudioFormat(StrEnum):
    MP3 = "mp3"
    OGG_VORBIS = "ogg_vorbis"
    PCM = "pcm"


FORMAT_EXTENSIONS = {
    AudioFormat.MP3: ".mp3",
    AudioFormat.OGG_VORBIS: ".ogg",
    AudioFormat.PCM: ".pcm",
}


def build_lexicon(grapheme: str, alias: str) -> str:
    """Renders a single-lexeme PLS document replacing ``grapheme`` with ``alias``."""
    return LEXICON_TEMPLATE.format(grapheme=escape(grapheme), alias=escape(alias))


@dataclass(frozen=True)
class PutLexicon(BaseCommand):
    service_name = "polly"
    operation = "put_lexicon"
    view_class = PutLexiconView
    required_fields = ("name", "source", "target")

    name: str
    source: str
    target: str

    @property
    def error_prefix(self) -> str:
        return f"Got an error adding lexicon {self.name}:"

    def send(self, client: Any) -> dict[str, Any]:
        response = client.put_lexicon(
            Name=self.name, Content=build_lexicon(self.source, self.target)
        )
        return {**response, "Name": self.name}


@dataclass(frozen=True)
class SynthesizeSpeech(BaseCommand):
    """
    Reads a text file and synthesizes it to an audio file next to it.

    The output name is the input name with its extension replaced by the
    extension of the output format (``speech.txt`` -> ``speech.mp3``).
    """

    service_name = "polly"
    operation = "synthesize_speech"
    view_class = SynthesizeSpeechView
    required_fields = ("filename", "voice")

    filename: str
    voice: str = DEFAULT_VOICE
    output_format: AudioFormat = AudioFormat.MP3

    def __post_init__(self):
        super().__post_init__()
        if self.output_format not in FORMAT_EXTENSIONS:
            raise ServiceError(
                ErrorKind.VALIDATION,
                f"Unsupported output format '{self.output_format}'.",
            )
        # Resolving the destination rejects a filename without an extension.
        if self.destination == Path(self.filename):
            raise ServiceError(
                ErrorKind.VALIDATION,
                f"{self.filename} already has the {self.destination.suffix} "
                "extension; the audio would overwrite it.",
            )

    @property
    def destination(self) -> Path:
        return output_path(
            self.filename, FORMAT_EXTENSIONS[AudioFormat(self.output_format)]
        )

    @property
    def error_prefix(self) -> str:
        return f"Got an error synthesizing speech from {self.filename}:"

    def read_text(self) -> str:
        try:
            text = Path(self.filename).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ServiceError(
                ErrorKind.VALIDATION, f"{self.filename} is not valid UTF-8 text."
            ) from e
        if not text.strip():
            raise ServiceError(
                ErrorKind.VALIDATION, f"{self.filename} contains no text."
            )
        return text

    def send(self, client: Any) -> BinaryStream:
        response = client.synthesize_speech(
            OutputFormat=str(self.output_format),
            Text=self.read_text(),
            VoiceId=self.voice,
        )
        headers = response.get("ResponseMetadata", {}).get("HTTPHeaders", {})
        content_length = headers.get("content-length")

        return BinaryStream(
            body=response["AudioStream"],
            destination=self.destination,
            content_type=response.get("ContentType"),
            content_length=int(content_length) if content_length else None,
        )
