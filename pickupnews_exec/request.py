from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from pickupnews.config import CONFIG
from pickupnews.errors import KeywordRuleLoadError
from pickupnews.logging_config import create_logger
from pickupnews.news.model import ZeroValueModel
from pickupnews.utils.time import default_date_range, get_target_timezone
from pickupnews_exec.storage.objectstore import ObjectStore


logger = create_logger("request")


class RequestParameter(BaseModel):
    """Parameters of one run, as sent by the scheduler event or the CLI."""
    model_config = ConfigDict(populate_by_name=True)

    from_date: str = Field(default="", alias="From")
    to_date: str = Field(default="", alias="To")
    s3_bucket_name: str = Field(default="", alias="S3BacketName")
    s3_object_key: str = Field(default="", alias="S3ObjectKey")
    # Inline rule, used when no keyword list is stored in the bucket
    keyword: str = Field(default="", alias="Keyword")
    notice_lower_limit: int = Field(default=0, alias="NoticeLowerLimit")


class KeywordRule(ZeroValueModel):
    keyword: str = ""
    # Don't notify if the number of news is at or below this value
    notice_lower_limit: int = Field(default=0, alias="noticeLowerLimit")


class DateRange(BaseModel):
    from_date: str
    to_date: str


_keyword_rule_list = TypeAdapter(Optional[List[KeywordRule]])


def resolve_date_range(params: RequestParameter, now: Optional[datetime] = None) -> DateRange:
    """Fill in missing dates: From defaults to yesterday, To to today, in the target timezone."""
    default_from, default_to = default_date_range(get_target_timezone(CONFIG.TARGET_TIMEZONE), now)
    return DateRange(
        from_date=params.from_date or default_from,
        to_date=params.to_date or default_to,
    )


def parse_keyword_rules(content: bytes) -> List[KeywordRule]:
    try:
        rules = _keyword_rule_list.validate_json(content)
    except ValidationError as e:
        raise KeywordRuleLoadError(f"Invalid keyword rule list: {e}") from e
    # A null document is an empty list
    return rules or []


async def load_keyword_rules(params: RequestParameter, object_store: Optional[ObjectStore] = None) -> List[KeywordRule]:
    """
    Keyword rules for this run: the JSON list stored at bucket/key when both are
    given, otherwise a single rule built from the inline keyword and limit.
    """
    if not params.s3_bucket_name or not params.s3_object_key:
        return [KeywordRule(keyword=params.keyword, notice_lower_limit=params.notice_lower_limit)]

    store = object_store or ObjectStore()
    content = await store.read_bytes(params.s3_bucket_name, params.s3_object_key)
    rules = parse_keyword_rules(content)
    logger.info(f"Loaded {len(rules)} keyword rules from {params.s3_bucket_name}/{params.s3_object_key}")
    return rules
