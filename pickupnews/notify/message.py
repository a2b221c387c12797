from dataclasses import dataclass

from pickupnews.news.model import NewsAPIResponse


@dataclass
class NotificationMessage:
    """Slack message for one keyword: a header line followed by the numbered article list."""
    header: str
    body: str = ""

    @property
    def text(self) -> str:
        return self.header + self.body


def exceeds_notice_lower_limit(result: NewsAPIResponse, notice_lower_limit: int) -> bool:
    return result.total_results > notice_lower_limit


def below_limit_message(result: NewsAPIResponse, notice_lower_limit: int) -> str:
    return (
        f"TotalResult is lower NoticeLowerLimit. "
        f"TotalResult:{result.total_results}, NoticeLowerLimit:{notice_lower_limit}\n"
    )


def build_notification_message(keyword: str, from_date: str, to_date: str, result: NewsAPIResponse) -> NotificationMessage:
    header = f"<!channel> Keyword: {keyword} resultCount: {result.total_results} from: {from_date} to: {to_date}\n"
    body = "".join(
        f"No.{i + 1}, {article.title or ''}, {article.url or ''}\n"
        for i, article in enumerate(result.articles)
    )
    return NotificationMessage(header=header, body=body)
