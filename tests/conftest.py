import io
import json
import threading
import pytest
from aiohttp import web
from botocore.exceptions import ClientError


NEWS_API_PATH = "/v2/everything"
WEBHOOK_PATH = "/services/T000/B000/XXXX"


def news_api_body(total_results, articles):
    return json.dumps({
        "status": "ok",
        "totalResults": total_results,
        "articles": [
            {
                "source": {"id": None, "name": "Example News"},
                "author": "Jane Doe",
                "title": title,
                "description": "description",
                "url": url,
                "urlToImage": None,
                "publishedAt": "2024-03-01T09:30:00Z",
                "content": "content",
            }
            for title, url in articles
        ],
    })


class FakeStreamingBody(io.BytesIO):
    """Records which thread read the object body."""

    def __init__(self, data):
        super().__init__(data)
        self.read_thread = None

    def read(self, *args):
        self.read_thread = threading.get_ident()
        return super().read(*args)


class FakeS3Client:
    """Stands in for a boto3 S3 client; only get_object is used."""

    def __init__(self, objects):
        self.objects = objects
        self.requests = []
        self.bodies = []

    def get_object(self, Bucket, Key):
        self.requests.append((Bucket, Key))
        if (Bucket, Key) not in self.objects:
            raise ClientError({"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}}, "GetObject")
        body = FakeStreamingBody(self.objects[(Bucket, Key)])
        self.bodies.append(body)
        return {"Body": body}


@pytest.fixture
def recorder():
    """Requests seen by the fake servers."""
    return {"news": [], "slack": []}


@pytest.fixture
def make_app(recorder):
    """
    Build an aiohttp app serving a fake NewsAPI endpoint and a fake Slack webhook.

    news_responses maps a keyword to (status, body); unknown keywords get zero results.
    """
    def _make_app(news_responses=None, slack_status=200):
        news_responses = news_responses or {}

        async def everything(request):
            recorder["news"].append(dict(request.query))
            status, body = news_responses.get(request.query.get("qInTitle"), (200, news_api_body(0, [])))
            return web.Response(status=status, text=body, content_type="application/json")

        async def webhook(request):
            raw = await request.text()
            recorder["slack"].append({
                "content_type": request.headers.get("Content-Type", ""),
                "raw": raw,
                "json": json.loads(raw),
            })
            return web.Response(status=slack_status, text="ok" if slack_status == 200 else "invalid_payload")

        app = web.Application()
        app.router.add_get(NEWS_API_PATH, everything)
        app.router.add_post(WEBHOOK_PATH, webhook)
        return app

    return _make_app


@pytest.fixture
def news_body():
    return news_api_body


@pytest.fixture
def fake_s3_client():
    def _fake_s3_client(objects):
        return FakeS3Client(objects)
    return _fake_s3_client
