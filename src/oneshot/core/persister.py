import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from oneshot.core.errors import ErrorKind, ServiceError
from oneshot.core.models import ByteStream

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def output_path(source: str | Path, extension: str) -> Path:
    """
    Derives the destination for a converted file: the final suffix of
    ``source`` is replaced by ``extension`` (``speech.txt`` -> ``speech.mp3``).

    Raises:
        ServiceError: VALIDATION when ``source`` has no suffix to replace.
    """
    path = Path(source)
    if not path.suffix:
        raise ServiceError(
            ErrorKind.VALIDATION,
            f"Cannot derive an output name from '{source}': it has no extension.",
        )
    if not extension.startswith("."):
        extension = f".{extension}"
    return path.with_suffix(extension)


def _iter_chunks(stream: ByteStream | Iterable[bytes], chunk_size: int):
    if hasattr(stream, "iter_chunks"):
        return stream.iter_chunks(chunk_size)
    return iter(stream)


def _close_stream(stream) -> None:
    close = getattr(stream, "close", None)
    if callable(close):
        close()


def persist(
    stream: ByteStream | Iterable[bytes],
    destination: str | Path,
    content_length: int | None = None,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """
    Drains a binary stream into ``destination`` one chunk at a time.

    The destination is truncated or created and its handle is closed on every
    exit path. Only the current chunk is held in memory.

    A failed write leaves the partial file on disk as written; the name is
    derived from the caller's input, so the command can simply be re-run.

    Returns:
        The number of bytes written.

    Raises:
        ServiceError: IO when the destination cannot be opened or written,
            TRANSPORT when the total differs from a declared content length.
        Errors raised by the stream itself propagate unchanged.
    """
    destination = Path(destination)
    written = 0

    try:
        chunks: Iterator[bytes] = _iter_chunks(stream, chunk_size)
        try:
            handle = destination.open("wb")
        except OSError as e:
            raise ServiceError(
                ErrorKind.IO, f"Could not open {destination} for writing: {e}"
            ) from e

        with handle:
            for chunk in chunks:
                if not chunk:
                    continue
                try:
                    handle.write(chunk)
                except OSError as e:
                    raise ServiceError(
                        ErrorKind.IO,
                        f"Write to {destination} failed after {written} bytes: {e}",
                    ) from e
                written += len(chunk)
    finally:
        _close_stream(stream)

    logger.debug("Wrote %d bytes to %s", written, destination)

    if content_length is not None and written != content_length:
        raise ServiceError(
            ErrorKind.TRANSPORT,
            f"Response body ended after {written} of {content_length} bytes.",
        )

    return written
