from aws_lambda_powertools.utilities.data_classes import SNSEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from cwa2mkr.lambdas.alarm_relay.relay import AlarmRelay, metrics

alarm_relay = AlarmRelay()


@metrics.log_metrics
@event_source(data_class=SNSEvent)
def lambda_handler(event: SNSEvent, _: LambdaContext) -> None:
    """Alarm Relay Lambda Handler for SNS events."""
    alarm_relay.relay(event)
