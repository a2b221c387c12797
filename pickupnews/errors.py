class PickupNewsError(Exception):
    """Base class for errors that abort a notification run."""
    pass


class ConfigurationError(PickupNewsError):
    pass


class ObjectStoreReadError(PickupNewsError):
    pass


class KeywordRuleLoadError(PickupNewsError):
    pass


class NewsQueryError(PickupNewsError):
    pass


class NewsDecodeError(PickupNewsError):
    pass


class NotificationError(PickupNewsError):
    pass


__all__ = [
    "PickupNewsError",
    "ConfigurationError",
    "ObjectStoreReadError",
    "KeywordRuleLoadError",
    "NewsQueryError",
    "NewsDecodeError",
    "NotificationError",
]
