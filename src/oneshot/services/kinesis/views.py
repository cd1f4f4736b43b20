from collections.abc import Mapping
from typing import Any

from oneshot.core.presenter import UNKNOWN, field_or_unknown


class DescribeStreamView:
    """
    Summarizes a stream description. Every attribute is optional in the
    response model, so each one falls back to the UNKNOWN placeholder.
    """

    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        description = field_or_unknown(payload, "StreamDescription")
        if not isinstance(description, Mapping):
            return ["Stream description:", f"  {UNKNOWN}"]

        shards = description.get("Shards")
        shard_count = len(shards) if isinstance(shards, list) else UNKNOWN

        return [
            "Stream description:",
            f"  Name:              {field_or_unknown(description, 'StreamName')}",
            f"  Status:            {field_or_unknown(description, 'StreamStatus')}",
            f"  Open shards:       {shard_count}",
            "  Retention (hours): "
            f"{field_or_unknown(description, 'RetentionPeriodHours')}",
            f"  Encryption:        {field_or_unknown(description, 'EncryptionType')}",
        ]
