# gp_relay/upstream/client.py

from typing import Optional

import httpx
from fastapi import Request


class UpstreamError(Exception):
    """Raised when the upstream feed could not be fetched."""


class UpstreamFetcher:
    """
    Performs one GET against the fixed upstream URL per call.

    The underlying httpx.Client is shared across requests; it carries no
    per-call state, so concurrent use from the worker threads is safe.
    """

    def __init__(self, url: str, client: Optional[httpx.Client] = None):
        self.url = url
        # Redirects are followed; celestrak.com answers with a redirect to celestrak.org
        self._client = client or httpx.Client(follow_redirects=True)

    def fetch(self) -> bytes:
        """
        Return the full upstream body, or raise UpstreamError.

        Any status above 299 is a failure and its body is discarded unread.
        """
        try:
            request = self._client.build_request("GET", self.url)
            response = self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise UpstreamError(f"request to {self.url} failed: {exc!r}") from exc

        try:
            if response.status_code > 299:
                raise UpstreamError(
                    f"error getting data (upstream status {response.status_code})"
                )
            try:
                return response.read()
            except httpx.HTTPError as exc:
                raise UpstreamError(f"reading upstream body failed: {exc!r}") from exc
        finally:
            response.close()

    def close(self) -> None:
        self._client.close()


def get_fetcher(request: Request) -> UpstreamFetcher:
    # Tests swap this out through app.dependency_overrides
    return request.app.state.fetcher
