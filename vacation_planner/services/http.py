"""
services/http.py
----------------
Generic GET used by every upstream adapter.
- Timeout taken from config.HTTP_TIMEOUT
- Network errors and 4xx/5xx become UpstreamError (404 can be mapped to NotFoundError)
- A body that is not JSON becomes MalformedResponseError
"""

from __future__ import annotations
import logging

import requests

from vacation_planner import config
from vacation_planner.core.errors import MalformedResponseError, NotFoundError, UpstreamError

logger = logging.getLogger(__name__)


def get_json(url: str, service: str, params: dict | None = None, not_found: str | None = None):
    """
    GET `url` and return the decoded JSON body.

    `service` names the API in error messages. When `not_found` is given, a
    404 answer raises NotFoundError(not_found) instead of UpstreamError.
    """
    logger.debug("GET %s", service)
    try:
        r = requests.get(url, params=params, timeout=config.HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise UpstreamError(service, str(e)) from e

    if r.status_code == 404 and not_found:
        raise NotFoundError(not_found)
    if r.status_code >= 400:
        # most of these APIs send {"error": ...} or {"message": ...} alongside the status
        try:
            body = r.json()
            msg = body.get("error_message") or body.get("message") or body.get("error") or r.text
        except (ValueError, AttributeError):
            msg = r.text
        raise UpstreamError(service, f"{r.status_code}: {msg}")

    try:
        return r.json()
    except ValueError as e:
        raise MalformedResponseError(service, "response body is not JSON") from e
