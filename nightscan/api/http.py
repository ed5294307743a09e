"""Plain HTTP client for artifact downloads."""
import logging

import requests

from nightscan.config import config

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Thin wrapper around a requests Session.

    Requests are never retried here; callers decide how many attempts an
    operation gets.
    """

    def __init__(self, timeout=None, session=None):
        self.timeout = timeout or config.http_timeout
        self.session = session or requests.Session()

    def get(self, url, **kwargs):
        """Issue a streaming GET and fail on HTTP error statuses."""
        kwargs.setdefault("timeout", self.timeout)
        kwargs.setdefault("stream", True)
        logger.debug("GET %s", url)
        response = self.session.get(url, **kwargs)
        try:
            response.raise_for_status()
        except requests.HTTPError:
            response.close()
            raise
        return response

    def open(self, url):
        """Return a readable binary stream over the body of url."""
        response = self.get(url)
        response.raw.decode_content = True
        return response.raw

    def close(self):
        self.session.close()
