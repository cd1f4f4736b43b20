import typer

from oneshot.services.cloudwatch.cli import cloudwatch_app
from oneshot.services.dynamodb.cli import dynamodb_app
from oneshot.services.kinesis.cli import kinesis_app
from oneshot.services.polly.cli import polly_app
from oneshot.services.s3.cli import s3_app

app = typer.Typer(help="Oneshot: single-request AWS commands")
app.add_typer(dynamodb_app, name="dynamodb")
app.add_typer(kinesis_app, name="kinesis")
app.add_typer(polly_app, name="polly")
app.add_typer(s3_app, name="s3")
app.add_typer(cloudwatch_app, name="cloudwatch")

if __name__ == "__main__":
    app()
