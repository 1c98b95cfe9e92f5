from time import time
from typing import Iterable

from aws_lambda_powertools import Logger

from cwa2mkr.core import constants
from cwa2mkr.core.types import CheckReport
from cwa2mkr.lambdas.alarm_relay.alarm_notification import AlarmNotification

logger = Logger(service=__name__)


def translate(notification: AlarmNotification, host_id: str) -> CheckReport | None:
    """Build a Mackerel check report, or None if the notification is incomplete."""
    if not notification.is_complete:
        logger.warning("Skipping unknown alarm notification: %r", notification)
        return None

    return CheckReport(
        source={"type": constants.SOURCE_TYPE_HOST, "hostId": host_id},
        name=notification.alarm_name,
        status=notification.to_mackerel_status(),
        message=notification.to_message(),
        occurredAt=int(time()),
    )


def translate_messages(messages: Iterable[str], host_id: str) -> list[CheckReport]:
    """Translate raw SNS messages in order, dropping any that aren't usable alarms."""
    reports = []

    for message in messages:
        try:
            notification = AlarmNotification.from_message(message)
        except ValueError as e:
            logger.warning("Failed to decode alarm notification: %s", str(e))
            continue

        if (report := translate(notification, host_id)) is not None:
            reports.append(report)

    return reports
