from dataclasses import dataclass
from typing import Any

from oneshot.core.errors import ErrorKind, ServiceError
from oneshot.core.models import BaseCommand
from oneshot.services.dynamodb.views import (
    CreateTableView,
    ListTablesView,
    ScanView,
)

DEFAULT_KEY = "k"
DEFAULT_CAPACITY = 10


@dataclass(frozen=True)
class ListTables(BaseCommand):
    service_name = "dynamodb"
    operation = "list_tables"
    view_class = ListTablesView

    limit: int | None = None

    def __post_init__(self):
        super().__post_init__()
        if self.limit is not None and not 1 <= self.limit <= 100:
            raise ServiceError(
                ErrorKind.VALIDATION, "The table limit must be between 1 and 100."
            )

    @property
    def error_prefix(self) -> str:
        return "Got an error listing tables:"

    def send(self, client: Any) -> dict[str, Any]:
        kwargs = {"Limit": self.limit} if self.limit is not None else {}
        return client.list_tables(**kwargs)


@dataclass(frozen=True)
class CreateTable(BaseCommand):
    """Creates a table with a single string hash key and provisioned throughput."""

    service_name = "dynamodb"
    operation = "create_table"
    view_class = CreateTableView
    required_fields = ("table", "key")

    table: str
    key: str = DEFAULT_KEY
    read_capacity: int = DEFAULT_CAPACITY
    write_capacity: int = DEFAULT_CAPACITY

    def __post_init__(self):
        super().__post_init__()
        if self.read_capacity < 1 or self.write_capacity < 1:
            raise ServiceError(
                ErrorKind.VALIDATION, "Read and write capacity must be at least 1."
            )

    @property
    def error_prefix(self) -> str:
        return f"Got an error creating table {self.table}:"

    def send(self, client: Any) -> dict[str, Any]:
        return client.create_table(
            TableName=self.table,
            KeySchema=[{"AttributeName": self.key, "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": self.key, "AttributeType": "S"}],
            ProvisionedThroughput={
                "ReadCapacityUnits": self.read_capacity,
                "WriteCapacityUnits": self.write_capacity,
            },
        )


@dataclass(frozen=True)
class Scan(BaseCommand):
    """Reads the first page of items in a table."""

    service_name = "dynamodb"
    operation = "scan"
    view_class = ScanView
    required_fields = ("table",)

    table: str

    @property
    def error_prefix(self) -> str:
        return f"Got an error listing items in table {self.table}:"

    def send(self, client: Any) -> dict[str, Any]:
        response = client.scan(TableName=self.table)
        return {**response, "TableName": self.table}
