from .web_fetcher import RequestsWebResourceFetcher, WebResourceFetcher

__all__ = ["RequestsWebResourceFetcher", "WebResourceFetcher"]
