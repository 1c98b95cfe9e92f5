from os import environ

from pytest import fixture

from .alarm_relay.helpers import API_KEY, HOST_ID


@fixture(autouse=True)
def lambda_environment_variables():
    environ["AWS_LAMBDA_FUNCTION_NAME"] = "test"
    environ["POWERTOOLS_DEV"] = "true"  # Pretty print logs
    environ["POWERTOOLS_METRICS_NAMESPACE"] = "CloudWatchAlarmRelay"
    environ["HOST_ID"] = HOST_ID
    environ["MACKEREL_APIKEY"] = API_KEY
