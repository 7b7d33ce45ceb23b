"""Shared HTTP helpers used by repository clients.

Encapsulates request/timeout error handling so callers avoid duplicating
try/except blocks. Requests are single-attempt and uncached; callers decide
what a failure means for them.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def robust_get(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
    **kwargs: Any
) -> Tuple[int, Dict[str, str], str]:
    """Perform a GET request with a timeout and DEBUG traces.

    Transport failures do not raise: they are reported as status 0 with the
    error text as body.

    Returns:
        Tuple of (status_code, headers_dict, body_text)
    """
    safe_target = safe_url(url)
    effective_timeout = timeout if timeout is not None else Constants.REQUEST_TIMEOUT

    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target
                )
            )
        try:
            response = requests.get(url, timeout=effective_timeout, headers=headers, **kwargs)
        except requests.Timeout:
            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP timeout",
                    extra=extra_context(
                        event="http_exception",
                        component="http_client",
                        action="GET",
                        outcome="timeout",
                        target=safe_target
                    )
                )
            return 0, {}, f"request timed out after {effective_timeout} seconds"
        except requests.RequestException as exc:  # includes ConnectionError
            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP request exception",
                    extra=extra_context(
                        event="http_exception",
                        component="http_client",
                        action="GET",
                        outcome="request_exception",
                        target=safe_target
                    )
                )
            return 0, {}, f"connection error: {exc}"

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success" if response.status_code < 400 else "http_error",
                    status_code=response.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target
                )
            )
        return response.status_code, dict(response.headers), response.text

