import pytest
from aiohttp import test_utils

from pickupnews.news.model import NewsAPIArticle, NewsAPIResponse
from pickupnews.notify.message import (
    below_limit_message,
    build_notification_message,
    exceeds_notice_lower_limit,
)
from pickupnews.notify.slack import SlackNotifier


@pytest.fixture
def sample_result():
    return NewsAPIResponse(
        status="ok",
        total_results=10,
        articles=[
            NewsAPIArticle(title="First headline", url="https://news.example/1"),
            NewsAPIArticle(title="Second headline", url="https://news.example/2"),
        ],
    )


class TestResultFormatter:

    def test_threshold_is_exclusive(self, sample_result):
        assert exceeds_notice_lower_limit(sample_result, 9)
        assert not exceeds_notice_lower_limit(sample_result, 10)
        assert not exceeds_notice_lower_limit(sample_result, 11)

    def test_below_limit_message(self):
        result = NewsAPIResponse(total_results=3)

        assert below_limit_message(result, 5) == "TotalResult is lower NoticeLowerLimit. TotalResult:3, NoticeLowerLimit:5\n"

    def test_header_and_numbered_articles(self, sample_result):
        message = build_notification_message("golang", "2024-03-01", "2024-03-02", sample_result)

        assert message.header == "<!channel> Keyword: golang resultCount: 10 from: 2024-03-01 to: 2024-03-02\n"
        assert message.body == (
            "No.1, First headline, https://news.example/1\n"
            "No.2, Second headline, https://news.example/2\n"
        )
        assert message.text == message.header + message.body

    def test_missing_title_renders_empty(self):
        result = NewsAPIResponse(total_results=1, articles=[NewsAPIArticle(url="https://news.example/1")])

        message = build_notification_message("golang", "2024-03-01", "2024-03-02", result)

        assert message.body == "No.1, , https://news.example/1\n"


class TestSlackNotifier:

    @pytest.mark.asyncio
    async def test_posts_json_text(self, make_app, recorder):
        async with test_utils.TestServer(make_app()) as server:
            notifier = SlackNotifier(str(server.make_url("/services/T000/B000/XXXX")))
            posted = await notifier.notify("<!channel> hello\n")

        assert posted
        assert len(recorder["slack"]) == 1
        assert recorder["slack"][0]["content_type"].startswith("application/json")
        assert recorder["slack"][0]["json"] == {"text": "<!channel> hello\n"}

    @pytest.mark.asyncio
    async def test_quotes_and_backslashes_are_escaped(self, make_app, recorder):
        text = 'No.1, He said "hi" \\o/, https://news.example/?q="x"\n'

        async with test_utils.TestServer(make_app()) as server:
            notifier = SlackNotifier(str(server.make_url("/services/T000/B000/XXXX")))
            await notifier.notify(text)

        assert recorder["slack"][0]["json"]["text"] == text, "Webhook payload should round-trip through JSON"

    @pytest.mark.asyncio
    async def test_non_200_is_tolerated(self, make_app, recorder):
        async with test_utils.TestServer(make_app(slack_status=400)) as server:
            notifier = SlackNotifier(str(server.make_url("/services/T000/B000/XXXX")))
            posted = await notifier.notify("hello")

        assert posted is False
        assert len(recorder["slack"]) == 1
