from functools import partial

import typer

from oneshot.core.runner import run_command
from oneshot.services.polly.commands import (
    DEFAULT_VOICE,
    AudioFormat,
    PutLexicon,
    SynthesizeSpeech,
)

polly_app = typer.Typer(help="Amazon Polly lexicons and speech synthesis")


@polly_app.command("put-lexicon")
def put_lexicon(
    name: str = typer.Option(..., "--name", help="Name of the lexicon"),
    source: str = typer.Option(..., "--from", help="The word to replace"),
    target: str = typer.Option(..., "--to", help="The replacement"),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """Add a pronunciation lexicon to the region."""
    exit_code = run_command(
        partial(PutLexicon, name=name, source=source, target=target),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)


@polly_app.command("synthesize-speech")
def synthesize_speech(
    filename: str = typer.Option(
        ..., "--filename", help="Text file to synthesize; output keeps its basename"
    ),
    voice: str = typer.Option(DEFAULT_VOICE, "--voice", help="Polly voice ID"),
    output_format: AudioFormat = typer.Option(
        AudioFormat.MP3, "--format", help="Audio format of the output file"
    ),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """Synthesize the text in a file into an audio file."""
    exit_code = run_command(
        partial(
            SynthesizeSpeech,
            filename=filename,
            voice=voice,
            output_format=output_format,
        ),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)
