"""
JSON-over-HTTP client for calls to other services.
"""
import logging
from typing import Any, Iterable, Optional, Tuple

import requests

from shared.domain.exceptions import ExternalServiceError, ExternalServiceTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = (3.05, 15)


class JsonHttpClient:
    """
    Thin wrapper around ``requests.Session``.

    Every call uses a bounded ``(connect, read)`` timeout. Transport failures
    and 5xx answers raise ``ExternalServiceError`` (``ExternalServiceTimeoutError``
    on timeout). Status codes listed in ``accept_statuses`` are returned to the
    caller so it can turn them into business answers; any other 4xx is raised
    through ``raise_for_status`` and reported as an external error as well.
    """

    HEADERS = {
        'Accept': 'application/json',
        'Content-Type': 'application/json',
    }

    def __init__(
        self,
        service_name: str,
        base_url: str,
        timeout: Tuple[float, float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.service_name = service_name
        self.base_url = base_url.rstrip('/')
        self.timeout = tuple(timeout)
        self.session = session or requests.Session()
        self.session.headers.update(self.HEADERS)

    def get(self, path: str, accept_statuses: Iterable[int] = (), **kwargs) -> requests.Response:
        return self.request('GET', path, accept_statuses=accept_statuses, **kwargs)

    def post(self, path: str, accept_statuses: Iterable[int] = (), **kwargs) -> requests.Response:
        return self.request('POST', path, accept_statuses=accept_statuses, **kwargs)

    def request(
        self,
        method: str,
        path: str,
        accept_statuses: Iterable[int] = (),
        **kwargs,
    ) -> requests.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout as e:
            logger.warning("%s %s timed out after %s", method, url, self.timeout)
            raise ExternalServiceTimeoutError(self.service_name, self._read_timeout()) from e
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ExternalServiceError(self.service_name, str(e)) from e

        if response.status_code in set(accept_statuses):
            return response

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.error("%s %s returned %s", method, url, response.status_code)
            raise ExternalServiceError(self.service_name, str(e)) from e
        return response

    def json(self, response: requests.Response) -> Any:
        """Decode a JSON body, treating garbage as a service failure."""
        try:
            return response.json()
        except ValueError as e:
            raise ExternalServiceError(self.service_name, "response body is not valid JSON") from e

    def _read_timeout(self) -> float:
        return self.timeout[-1]
