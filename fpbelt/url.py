"""
URL wrappers for fpbelt, built on httpx.URL and httpx.QueryParams.

Only absolute URLs (scheme and host) parse. Query parameters are immutable:
set_param returns a new QueryParams rather than editing the one it is given.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import httpx
from loguru import logger

from .option import Err, Ok, Option, Result, from_nullable, result_to_option

E = TypeVar("E")


# =============================================================================
# PARSING
# =============================================================================

def unsafe_parse(x: str) -> httpx.URL:
    """
    Parse an absolute URL.

    Raises:
        httpx.InvalidURL: If x is malformed or lacks a scheme or host
    """
    url = httpx.URL(x)
    if not url.is_absolute_url:
        raise httpx.InvalidURL(f"'{x}' is not an absolute URL")
    return url


def parse(on_error: Callable[[httpx.InvalidURL], E]) -> Callable[[str], Result[E, httpx.URL]]:
    """Parse an absolute URL, mapping failure through on_error."""
    def parse_with(x: str) -> Result[E, httpx.URL]:
        try:
            return Ok(unsafe_parse(x))
        except httpx.InvalidURL as e:
            logger.debug("URL parse failed: {}", e)
            return Err(on_error(e))
    return parse_with


def parse_o(x: str) -> Option[httpx.URL]:
    """Parse an absolute URL, discarding the reason for failure."""
    return result_to_option(parse(lambda e: e)(x))


# =============================================================================
# REFINEMENTS
# =============================================================================

def is_url(x: Any) -> bool:
    return isinstance(x, httpx.URL)


def is_url_search_params(x: Any) -> bool:
    return isinstance(x, httpx.QueryParams)


# =============================================================================
# QUERY PARAMETERS
# =============================================================================

def get_param(key: str) -> Callable[[httpx.QueryParams], Option[str]]:
    """First value of key, or NOTHING when absent."""
    def get(params: httpx.QueryParams) -> Option[str]:
        return from_nullable(params.get(key))
    return get


def set_param(key: str) -> Callable[[str], Callable[[httpx.QueryParams], httpx.QueryParams]]:
    """Return new params with key set to a single value. Other keys are kept."""
    def with_value(value: str) -> Callable[[httpx.QueryParams], httpx.QueryParams]:
        def apply(params: httpx.QueryParams) -> httpx.QueryParams:
            return params.set(key, value)
        return apply
    return with_value
