from decimal import Decimal

from oneshot.core.presenter import FIRST_PAGE_NOTICE, UNKNOWN, render
from oneshot.services.dynamodb.views import (
    CreateTableView,
    ListTablesView,
    ScanView,
    format_item,
)


def test_scan_view_empty_collection_renders_nothing():
    assert render({"TableName": "t", "Items": []}, ScanView) == []
    assert render({"TableName": "t"}, ScanView) == []


def test_scan_view_lists_items():
    payload = {
        "TableName": "music",
        "Items": [
            {"k": {"S": "a"}, "plays": {"N": "3"}},
            {"k": {"S": "b"}},
        ],
    }

    assert render(payload, ScanView) == [
        "Items in table music:",
        f"   {{'k': 'a', 'plays': {Decimal('3')!r}}}",
        "   {'k': 'b'}",
    ]


def test_scan_view_notes_truncated_page():
    payload = {
        "TableName": "music",
        "Items": [{"k": {"S": "a"}}],
        "LastEvaluatedKey": {"k": {"S": "a"}},
    }

    assert render(payload, ScanView)[-1] == FIRST_PAGE_NOTICE


def test_format_item_keeps_undecodable_attributes():
    assert format_item({"weird": {"ZZ": "?"}}) == "{'weird': {'ZZ': '?'}}"


def test_list_tables_view():
    assert render({"TableNames": []}, ListTablesView) == []
    assert render({"TableNames": ["a", "b"]}, ListTablesView) == [
        "Current DynamoDB tables:",
        "  a",
        "  b",
    ]


def test_create_table_view_with_missing_fields():
    assert render({}, CreateTableView) == [
        f"New table: {UNKNOWN}",
        f"  Status: {UNKNOWN}",
    ]
    payload = {
        "TableDescription": {
            "TableArn": "arn:aws:dynamodb:us-east-1:123456789012:table/t",
            "TableStatus": "CREATING",
        }
    }
    assert render(payload, CreateTableView) == [
        "New table: arn:aws:dynamodb:us-east-1:123456789012:table/t",
        "  Status: CREATING",
    ]
