from dataclasses import dataclass
from typing import Any

from oneshot.core.models import BaseCommand
from oneshot.services.kinesis.views import DescribeStreamView


@dataclass(frozen=True)
class DescribeStream(BaseCommand):
    service_name = "kinesis"
    operation = "describe_stream"
    view_class = DescribeStreamView
    required_fields = ("name",)

    name: str

    @property
    def error_prefix(self) -> str:
        return f"Got an error describing stream {self.name}:"

    def send(self, client: Any) -> dict[str, Any]:
        return client.describe_stream(StreamName=self.name)
