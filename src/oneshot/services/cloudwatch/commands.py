from dataclasses import dataclass
from typing import Any

from oneshot.core.errors import ErrorKind, ServiceError
from oneshot.core.models import BaseCommand, require_text
from oneshot.services.cloudwatch.views import DeleteAlarmsView

MAX_ALARMS_PER_CALL = 100


@dataclass(frozen=True)
class DeleteAlarms(BaseCommand):
    service_name = "cloudwatch"
    operation = "delete_alarms"
    view_class = DeleteAlarmsView

    names: tuple[str, ...]

    def __post_init__(self):
        super().__post_init__()
        if not self.names:
            raise ServiceError(
                ErrorKind.VALIDATION, "At least one alarm name is required."
            )
        if len(self.names) > MAX_ALARMS_PER_CALL:
            raise ServiceError(
                ErrorKind.VALIDATION,
                f"At most {MAX_ALARMS_PER_CALL} alarms can be deleted at once.",
            )
        for name in self.names:
            require_text(name, "alarm name")

    @property
    def error_prefix(self) -> str:
        return f"Got an error deleting alarms {', '.join(self.names)}:"

    def send(self, client: Any) -> dict[str, Any]:
        response = client.delete_alarms(AlarmNames=list(self.names))
        return {**response, "AlarmNames": list(self.names)}
