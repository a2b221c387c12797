from .message import (
    NotificationMessage,
    below_limit_message,
    build_notification_message,
    exceeds_notice_lower_limit,
)
from .slack import SlackNotifier

__all__ = [
    "NotificationMessage",
    "below_limit_message",
    "build_notification_message",
    "exceeds_notice_lower_limit",
    "SlackNotifier",
]
