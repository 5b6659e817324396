# src/api/http.py
import logging
from typing import Any

import requests
from requests.exceptions import RequestException

from src.api.errors import UpstreamError
from src.config import HTTP_TIMEOUT_S, USER_AGENT

logger = logging.getLogger("charlie")


def http_get_json(
    url: str,
    params: dict[str, Any] | None = None,
    timeout: float | None = HTTP_TIMEOUT_S,
) -> Any:
    """
    GET + JSON. Ei uudelleenyrityksiä: jokainen epäonnistuminen nostetaan UpstreamErrorina.
    Non-2xx vastauksen statuskoodi kulkee virheen mukana (esim. 404 → kaupunkia ei löydy).
    """
    headers = {"User-Agent": USER_AGENT}
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=headers)
    except RequestException as e:
        raise UpstreamError(f"GET {url} failed: {e}") from e

    status = resp.status_code
    try:
        resp.raise_for_status()
    except RequestException as e:
        raise UpstreamError(f"GET {url} returned HTTP {status}", status_code=status) from e

    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamError(f"GET {url} returned invalid JSON: {e}", status_code=status) from e
