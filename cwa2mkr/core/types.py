from typing import NotRequired, TypedDict


class Source(TypedDict):
    type: str
    hostId: str


class CheckReport(TypedDict):
    source: Source
    name: str
    # One of "OK", "WARNING", "CRITICAL", "UNKNOWN"
    status: str
    message: str
    # Epoch seconds
    occurredAt: int
    # Resend interval in minutes, Mackerel does not resend when absent
    notificationInterval: NotRequired[int]
