from collections.abc import Mapping
from typing import Any

from boto3.dynamodb.types import TypeDeserializer

from oneshot.core.presenter import FIRST_PAGE_NOTICE, UNKNOWN, field_or_unknown

_deserializer = TypeDeserializer()


def format_item(item: Mapping[str, Any]) -> str:
    """
    Converts a wire-format item ({"k": {"S": "v"}}) to its plain Python form.
    Attributes that cannot be decoded are shown as sent.
    """
    plain = {}
    for name, value in item.items():
        try:
            plain[name] = _deserializer.deserialize(value)
        except (TypeError, ValueError, AttributeError):
            plain[name] = value
    return repr(plain)


class ListTablesView:
    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        names = payload.get("TableNames") or []
        if not names:
            return []

        lines = ["Current DynamoDB tables:"]
        lines.extend(f"  {name}" for name in names)
        if payload.get("LastEvaluatedTableName"):
            lines.append(FIRST_PAGE_NOTICE)
        return lines


class CreateTableView:
    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        description = field_or_unknown(payload, "TableDescription")
        return [
            f"New table: {field_or_unknown(description, 'TableArn')}",
            f"  Status: {field_or_unknown(description, 'TableStatus')}",
        ]


class ScanView:
    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        items = payload.get("Items") or []
        if not items:
            return []

        lines = [f"Items in table {payload.get('TableName') or UNKNOWN}:"]
        lines.extend(f"   {format_item(item)}" for item in items)
        if payload.get("LastEvaluatedKey"):
            lines.append(FIRST_PAGE_NOTICE)
        return lines
