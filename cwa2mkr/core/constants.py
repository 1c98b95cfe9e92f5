# Mackerel check monitoring API
# https://mackerel.io/api-docs/entry/check-monitoring
CHECK_REPORT_ENDPOINT = "https://api.mackerelio.com/api/v0/monitoring/checks/report"
API_KEY_HEADER = "X-Api-Key"
SOURCE_TYPE_HOST = "host"

# Check report statuses
STATUS_OK = "OK"
STATUS_WARNING = "WARNING"
STATUS_CRITICAL = "CRITICAL"

# Alarm descriptions starting with this prefix are reported as critical
CRITICAL_DESCRIPTION_PREFIX = "CRITICAL"

REPORT_MESSAGE_FORMAT = (
    "{alarm_name} status is '{new_state}', reason: {state_reason}, "
    "alarm_description: {alarm_description}, state_change_time: {state_change_time}, "
    "metrics: {metric_name}, namespace: {namespace}"
)

# Environment variable names
HOST_ID = "HOST_ID"
MACKEREL_APIKEY = "MACKEREL_APIKEY"

METRICS_NAMESPACE = "CloudWatchAlarmRelay"
