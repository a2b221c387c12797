from .model import NewsAPIArticle, NewsAPIResponse, NewsAPISource

from .client import NewsAPIClient, build_query_params

__all__ = [
    "NewsAPIArticle",
    "NewsAPIResponse",
    "NewsAPISource",
    "NewsAPIClient",
    "build_query_params",
]
