from collections.abc import Mapping
from typing import Any


class DeleteAlarmsView:
    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        return [f"Deleted alarm {name}" for name in payload.get("AlarmNames") or []]
