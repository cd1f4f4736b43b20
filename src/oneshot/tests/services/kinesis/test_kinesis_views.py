from oneshot.core.presenter import UNKNOWN, render
from oneshot.services.kinesis.views import DescribeStreamView


def test_full_description():
    payload = {
        "StreamDescription": {
            "StreamName": "clicks",
            "StreamStatus": "ACTIVE",
            "Shards": [{"ShardId": "0"}, {"ShardId": "1"}],
            "RetentionPeriodHours": 24,
            "EncryptionType": "KMS",
        }
    }

    assert render(payload, DescribeStreamView) == [
        "Stream description:",
        "  Name:              clicks",
        "  Status:            ACTIVE",
        "  Open shards:       2",
        "  Retention (hours): 24",
        "  Encryption:        KMS",
    ]


def test_missing_optional_fields_use_placeholder():
    payload = {"StreamDescription": {"StreamName": "clicks"}}

    lines = render(payload, DescribeStreamView)

    assert lines[1] == "  Name:              clicks"
    assert lines[2] == f"  Status:            {UNKNOWN}"
    assert lines[3] == f"  Open shards:       {UNKNOWN}"
    assert lines[4] == f"  Retention (hours): {UNKNOWN}"
    assert lines[5] == f"  Encryption:        {UNKNOWN}"


def test_missing_description_does_not_raise():
    assert render({}, DescribeStreamView) == ["Stream description:", f"  {UNKNOWN}"]
