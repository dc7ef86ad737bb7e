"""Request options for Management API calls.

Options are applied to the outgoing ``httpx.Request`` in order, so a later
option overrides an earlier one that touches the same parameter or header.
"""
from typing import Callable, Iterable, Sequence

import httpx

DEFAULT_PER_PAGE = 50


class RequestOption:
    """Mutation of an outgoing request."""

    def __init__(self, apply: Callable[[httpx.Request], None]) -> None:
        self._apply = apply

    def apply(self, request: httpx.Request) -> None:
        self._apply(request)


def parameter(key: str, value: str) -> RequestOption:
    """Set a query parameter, replacing any previous value."""

    def apply(request: httpx.Request) -> None:
        request.url = request.url.copy_set_param(key, value)

    return RequestOption(apply)


def header(key: str, value: str) -> RequestOption:
    """Set a request header."""

    def apply(request: httpx.Request) -> None:
        request.headers[key] = value

    return RequestOption(apply)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def page(number: int) -> RequestOption:
    """Page index to return, zero based."""
    return parameter("page", str(number))


def per_page(items: int) -> RequestOption:
    """Number of items per page."""
    return parameter("per_page", str(items))


def include_totals(include: bool) -> RequestOption:
    """Wrap list results in an object carrying pagination totals."""
    return parameter("include_totals", _flag(include))


def take(items: int) -> RequestOption:
    """Number of items to return with checkpoint pagination."""
    return parameter("take", str(items))


def from_(checkpoint: str) -> RequestOption:
    """Checkpoint cursor to continue from."""
    return parameter("from", checkpoint)


def query(expression: str) -> RequestOption:
    """Search expression."""
    return parameter("q", expression)


def _fields(names: Sequence[str], include: bool) -> RequestOption:
    def apply(request: httpx.Request) -> None:
        request.url = request.url.copy_set_param("fields", ",".join(names))
        request.url = request.url.copy_set_param("include_fields", _flag(include))

    return RequestOption(apply)


def include_fields(*names: str) -> RequestOption:
    """Only return the named fields."""
    return _fields(names, True)


def exclude_fields(*names: str) -> RequestOption:
    """Return everything except the named fields."""
    return _fields(names, False)


def apply_list_defaults(
    options: Iterable[RequestOption], items: int = DEFAULT_PER_PAGE
) -> RequestOption:
    """Combine list defaults with caller options.

    Defaults go first so any caller option setting the same parameter wins.
    """
    options = list(options)

    def apply(request: httpx.Request) -> None:
        per_page(items).apply(request)
        include_totals(True).apply(request)
        for option in options:
            option.apply(request)

    return RequestOption(apply)
