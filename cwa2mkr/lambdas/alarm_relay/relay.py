from os import getenv

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import SNSEvent
from requests import Session

from cwa2mkr.core import constants
from cwa2mkr.core.config import RelayConfig
from cwa2mkr.core.exceptions import SubmissionError
from cwa2mkr.lambdas.alarm_relay.mackerel import post_checks_report
from cwa2mkr.lambdas.alarm_relay.translate import translate_messages

metrics = Metrics(
    service=getenv("AWS_LAMBDA_FUNCTION_NAME"), namespace=constants.METRICS_NAMESPACE
)


class AlarmRelay:
    def __init__(self, config: RelayConfig | None = None) -> None:
        # Fails Lambda initialisation if HOST_ID or MACKEREL_APIKEY is missing
        self.config = config if config is not None else RelayConfig.from_environment()
        self.logger = Logger(
            service=getenv("AWS_LAMBDA_FUNCTION_NAME"),
            datefmt="%Y-%m-%dT%H:%M:%S.%f",
            use_datetime_directive=True,
            utc=True,
        )
        self.session = Session()

    def relay(self, event: SNSEvent) -> None:
        """Send given SNS event's alarm notifications to Mackerel as one batch."""
        # A record without a message is skipped like any other undecodable one
        messages = [record.sns.get("Message") or "" for record in event.records]
        self.logger.append_keys(HostId=self.config.host_id, RecordCount=len(messages))
        self.logger.info("Received %d alarm notifications", len(messages))
        metrics.add_metric(
            name="NotificationsReceived", unit=MetricUnit.Count, value=len(messages)
        )

        reports = translate_messages(messages, self.config.host_id)
        if skipped := len(messages) - len(reports):
            metrics.add_metric(
                name="NotificationsSkipped", unit=MetricUnit.Count, value=skipped
            )

        try:
            post_checks_report(self.config.api_key, reports, self.session)
        except SubmissionError:
            self.logger.exception(
                "Failed to submit %d check reports to Mackerel", len(reports)
            )
            raise

        metrics.add_metric(
            name="ReportsSubmitted", unit=MetricUnit.Count, value=len(reports)
        )
        self.logger.info("Submitted %d check reports to Mackerel", len(reports))
