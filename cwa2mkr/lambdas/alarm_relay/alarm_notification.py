from dataclasses import dataclass
from json import loads
from typing import Any

from cwa2mkr.core import constants


def _lookup(payload: dict[str, Any], key: str) -> Any:
    """Get `key` from `payload`, falling back to a case-insensitive match."""
    if key in payload:
        return payload[key]

    for name, value in payload.items():
        if name.lower() == key.lower():
            return value


def _string_field(payload: dict[str, Any], key: str) -> str:
    value = _lookup(payload, key)

    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class AlarmNotification:
    """CloudWatch alarm state change, as published to SNS.

    Only the fields needed to build a Mackerel check report are kept, e.g.:

    {
      "AlarmName": "test",
      "AlarmDescription": "test",
      "NewStateValue": "ALARM",
      "NewStateReason": "Threshold Crossed: 1 datapoint [1.0] was greater than or equal to the threshold (0.0).",
      "StateChangeTime": "2018-02-16T08:42:33.109+0000",
      "Trigger": {"MetricName": "FailedInvocations", "Namespace": "AWS/Events", ...},
      ...
    }
    """

    alarm_name: str = ""
    alarm_description: str = ""
    new_state: str = ""
    state_reason: str = ""
    state_change_time: str = ""
    metric_name: str = ""
    namespace: str = ""

    @classmethod
    def from_message(cls, message: str) -> "AlarmNotification":
        """Decode an SNS message body, raising `ValueError` if it isn't an alarm."""
        payload = loads(message)
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

        trigger = _lookup(payload, "Trigger")
        if trigger is None:
            trigger = {}
        if not isinstance(trigger, dict):
            raise ValueError(
                f"'Trigger' must be an object, got {type(trigger).__name__}"
            )

        return cls(
            alarm_name=_string_field(payload, "AlarmName"),
            alarm_description=_string_field(payload, "AlarmDescription"),
            new_state=_string_field(payload, "NewStateValue"),
            state_reason=_string_field(payload, "NewStateReason"),
            state_change_time=_string_field(payload, "StateChangeTime"),
            metric_name=_string_field(trigger, "MetricName"),
            namespace=_string_field(trigger, "Namespace"),
        )

    @property
    def is_complete(self) -> bool:
        return bool(self.alarm_name and self.new_state)

    def to_mackerel_status(self) -> str:
        if self.new_state == constants.STATUS_OK:
            return constants.STATUS_OK
        if self.alarm_description.startswith(constants.CRITICAL_DESCRIPTION_PREFIX):
            return constants.STATUS_CRITICAL
        return constants.STATUS_WARNING

    def to_message(self) -> str:
        return constants.REPORT_MESSAGE_FORMAT.format(
            alarm_name=self.alarm_name,
            new_state=self.new_state,
            state_reason=self.state_reason,
            alarm_description=self.alarm_description,
            state_change_time=self.state_change_time,
            metric_name=self.metric_name,
            namespace=self.namespace,
        )
