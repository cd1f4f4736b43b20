from unittest import mock

from typer.testing import CliRunner

import oneshot.services.dynamodb.cli as dynamodb_cli
from oneshot.main import app
from oneshot.services.dynamodb.commands import CreateTable, ListTables, Scan

runner = CliRunner()


@mock.patch.object(dynamodb_cli, "run_command")
def test_scan_builds_request(mock_run_command):
    mock_run_command.return_value = 0

    result = runner.invoke(app, ["dynamodb", "scan", "--table", "music"])

    assert result.exit_code == 0
    args, kwargs = mock_run_command.call_args
    assert args[0]() == Scan(table="music")
    assert kwargs["region"] is None
    assert kwargs["verbose"] is False
    assert kwargs["timeout"] is None


@mock.patch.object(dynamodb_cli, "run_command")
def test_create_table_custom_flags(mock_run_command):
    mock_run_command.return_value = 0

    result = runner.invoke(
        app,
        [
            "dynamodb",
            "create-table",
            "--table",
            "t",
            "--key",
            "id",
            "--read-capacity",
            "5",
            "--region",
            "eu-west-1",
            "--verbose",
            "--timeout",
            "3",
        ],
    )

    assert result.exit_code == 0
    args, kwargs = mock_run_command.call_args
    assert args[0]() == CreateTable(table="t", key="id", read_capacity=5)
    assert kwargs["region"] == "eu-west-1"
    assert kwargs["verbose"] is True
    assert kwargs["timeout"] == 3.0


@mock.patch.object(dynamodb_cli, "run_command")
def test_list_tables_propagates_exit_code(mock_run_command):
    mock_run_command.return_value = 1

    result = runner.invoke(app, ["dynamodb", "list-tables", "--limit", "5"])

    assert result.exit_code == 1
    args, _ = mock_run_command.call_args
    assert args[0]() == ListTables(limit=5)


def test_scan_requires_table():
    result = runner.invoke(app, ["dynamodb", "scan"])

    assert result.exit_code != 0


def test_registered_commands():
    command_names = [c.name for c in dynamodb_cli.dynamodb_app.registered_commands]
    assert command_names == ["list-tables", "create-table", "scan"]
