from unittest import mock

from typer.testing import CliRunner

import oneshot.services.cloudwatch.cli as cloudwatch_cli
from oneshot.main import app
from oneshot.services.cloudwatch.commands import DeleteAlarms

runner = CliRunner()


@mock.patch.object(cloudwatch_cli, "run_command")
def test_delete_alarms_repeated_flag(mock_run_command):
    mock_run_command.return_value = 0

    result = runner.invoke(
        app, ["cloudwatch", "delete-alarms", "--name", "a", "--name", "b"]
    )

    assert result.exit_code == 0
    args, _ = mock_run_command.call_args
    assert args[0]() == DeleteAlarms(names=("a", "b"))


def test_delete_alarms_requires_a_name():
    result = runner.invoke(app, ["cloudwatch", "delete-alarms"])

    assert result.exit_code != 0
