import asyncio
from typing import Any, Dict, List, Optional
from pydantic import ValidationError

from pickupnews.config import CONFIG, Config
from pickupnews.errors import ConfigurationError
from pickupnews.logging_config import logger
from pickupnews.news.client import NewsAPIClient
from pickupnews.notify.message import (
    below_limit_message,
    build_notification_message,
    exceeds_notice_lower_limit,
)
from pickupnews.notify.slack import SlackNotifier
from pickupnews_exec.request import (
    RequestParameter,
    load_keyword_rules,
    resolve_date_range,
)
from pickupnews_exec.storage.objectstore import ObjectStore


SUCCESS_MESSAGE = "Success notification."


async def handle_request(
    params: RequestParameter,
    config: Config = CONFIG,
    object_store: Optional[ObjectStore] = None,
    news_client: Optional[NewsAPIClient] = None,
    notifier: Optional[SlackNotifier] = None,
) -> str:
    """
    Run one notification job.

    Keywords are processed one after another in load order. A keyword whose
    result count is at or below its notice lower limit is skipped; with
    PICKUPNEWS_STOP_AT_FIRST_BELOW_LIMIT the run instead returns right there.

    Returns:
        "Success notification." when at least one notification was posted,
        otherwise the below-limit message of every keyword.

    Raises:
        PickupNewsError: on any fatal failure; nothing is retried.
    """
    if news_client is None or notifier is None:
        config.require_credentials()
    news_client = news_client or NewsAPIClient(api_key=config.PICKUPNEWS_APIKEY)  # type: ignore
    notifier = notifier or SlackNotifier(webhook_url=config.PICKUPNEWS_WEBHOOKURL)  # type: ignore

    date_range = resolve_date_range(params)
    rules = await load_keyword_rules(params, object_store)
    logger.info(f"Processing {len(rules)} keyword(s) from {date_range.from_date} to {date_range.to_date}")

    notified = 0
    skipped: List[str] = []
    for rule in rules:
        result = await news_client.search_in_title(rule.keyword, date_range.from_date, date_range.to_date)

        if not exceeds_notice_lower_limit(result, rule.notice_lower_limit):
            message = below_limit_message(result, rule.notice_lower_limit)
            logger.info(f"Keyword '{rule.keyword}': {message.strip()}")
            if config.PICKUPNEWS_STOP_AT_FIRST_BELOW_LIMIT:
                return message
            skipped.append(message)
            continue

        message = build_notification_message(rule.keyword, date_range.from_date, date_range.to_date, result)
        # A rejected post is only logged; it does not change the run result
        await notifier.notify(message.text)
        notified += 1

    if notified == 0 and skipped:
        return "".join(skipped)
    return SUCCESS_MESSAGE


def parse_event(event: Optional[Dict[str, Any]]) -> RequestParameter:
    try:
        return RequestParameter.model_validate(event or {})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid request parameters: {e}") from e


def lambda_handler(event: Optional[Dict[str, Any]], context: Any = None) -> str:
    """AWS Lambda entry point. Fatal errors propagate and fail the invocation."""
    params = parse_event(event)
    return asyncio.run(handle_request(params))


__all__ = ["SUCCESS_MESSAGE", "handle_request", "parse_event", "lambda_handler"]
