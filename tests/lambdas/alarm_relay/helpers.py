from json import dumps

HOST_ID = "3Yr9eNBfvwT"
API_KEY = "test-api-key"

ALARM_NOTIFICATION = {
    "AlarmName": "cron failed",
    "AlarmDescription": "",
    "AWSAccountId": "123456789012",
    "NewStateValue": "ALARM",
    "NewStateReason": "threshold breached",
    "StateChangeTime": "2024-01-01T00:00:00Z",
    "Region": "Asia Pacific (Tokyo)",
    "OldStateValue": "OK",
    "Trigger": {
        "MetricName": "Errors",
        "Namespace": "AWS/Lambda",
        "StatisticType": "Statistic",
        "Statistic": "SUM",
        "Unit": None,
        "Dimensions": [{"name": "FunctionName", "value": "cron"}],
        "Period": 60,
        "EvaluationPeriods": 1,
        "ComparisonOperator": "GreaterThanOrEqualToThreshold",
        "Threshold": 0,
        "TreatMissingData": "- TreatMissingData: NonBreaching",
        "EvaluateLowSampleCountPercentile": "",
    },
}

SCENARIO_A_MESSAGE = (
    "cron failed status is 'ALARM', reason: threshold breached, alarm_description: , "
    "state_change_time: 2024-01-01T00:00:00Z, metrics: Errors, namespace: AWS/Lambda"
)


def alarm_message(**overrides) -> str:
    return dumps(ALARM_NOTIFICATION | overrides)


def create_sns_event(*messages: str) -> dict:
    return {
        "Records": [
            {
                "EventVersion": "1.0",
                "EventSubscriptionArn": "arn:aws:sns:ap-northeast-1:123456789012:alarms:7f5e",
                "EventSource": "aws:sns",
                "Sns": {
                    "SignatureVersion": "1",
                    "Timestamp": "2024-01-01T00:00:01.000Z",
                    "Signature": "EXAMPLE",
                    "SigningCertUrl": "EXAMPLE",
                    "MessageId": f"95df01b4-ee98-5cb9-9903-4c221d41eb5{i}",
                    "Message": message,
                    "MessageAttributes": {},
                    "Type": "Notification",
                    "UnsubscribeUrl": "EXAMPLE",
                    "TopicArn": "arn:aws:sns:ap-northeast-1:123456789012:alarms",
                    "Subject": "ALARM",
                },
            }
            for i, message in enumerate(messages)
        ]
    }
