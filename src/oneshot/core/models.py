from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Protocol

from oneshot.core.errors import ErrorKind, ServiceError


class ViewProtocol(Protocol):
    @classmethod
    def format_lines(cls, payload: Any) -> list[str]: ...


class ByteStream(Protocol):
    """A response body read incrementally, such as a botocore StreamingBody."""

    def iter_chunks(self, chunk_size: int = ...) -> Iterable[bytes]: ...


@dataclass(frozen=True)
class BinaryStream:
    """
    Binary payload that is persisted to disk instead of rendered.

    ``summary`` carries the identifiers the view prints next to the
    destination and byte count.
    """

    body: ByteStream | Iterable[bytes]
    destination: Path
    content_type: str | None = None
    content_length: int | None = None
    summary: Mapping[str, Any] = field(default_factory=dict)


def require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ServiceError(
            ErrorKind.VALIDATION, f"A non-empty {field_name} is required."
        )
    return value


@dataclass(frozen=True)
class BaseCommand(ABC):
    """
    One single-shot operation against a remote service.

    Subclasses are frozen dataclasses; every field named in ``required_fields``
    is checked for a non-empty string on construction.

    A command that needs a second service lists it in ``companion_services``;
    a client for each is passed to ``send`` as a keyword argument named after
    the service.
    """

    service_name: ClassVar[str]
    operation: ClassVar[str]
    view_class: ClassVar[type[ViewProtocol]]
    required_fields: ClassVar[tuple[str, ...]] = ()
    companion_services: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self):
        for name in self.required_fields:
            require_text(getattr(self, name), name.replace("_", " "))

    @property
    @abstractmethod
    def error_prefix(self) -> str:
        pass

    @abstractmethod
    def send(self, client: Any, **companions: Any) -> Mapping[str, Any] | BinaryStream:
        pass

    def describe(self) -> list[tuple[str, str]]:
        return [(f.name, str(getattr(self, f.name))) for f in fields(self)]


@dataclass(frozen=True)
class Success:
    payload: Mapping[str, Any] | BinaryStream

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: ServiceError

    @property
    def ok(self) -> bool:
        return False


CommandResult = Success | Failure
