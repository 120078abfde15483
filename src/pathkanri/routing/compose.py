"""Query string and base URL composition for substituted paths."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from pathkanri.routing.params import param_to_str


def encode_query(query_params: Mapping[str, Any]) -> str:
    """Serialize query parameters as ``key=value`` pairs joined by ``&``.

    Pairs keep the mapping's iteration order. A list or tuple value
    repeats its key once per item::

        encode_query({"page": 1, "tag": ["a", "b c"]})
        -> "page=1&tag=a&tag=b%20c"

    """
    pairs: list[tuple[str, str]] = []
    for key, value in query_params.items():
        if isinstance(value, list | tuple):
            pairs.extend((key, param_to_str(item)) for item in value)
        else:
            pairs.append((key, param_to_str(value)))
    return urlencode(pairs, quote_via=quote)


def with_query_params(path: str, query_params: Mapping[str, Any] | None) -> str:
    """Append ``/?`` and the encoded query to *path*.

    Returns *path* unchanged when *query_params* is None or empty.
    """
    if not query_params:
        return path
    return f"{path}/?{encode_query(query_params)}"


def with_base_url(base_url: str, path: str) -> str:
    """Prefix *path* with *base_url*. No slashes are added or stripped."""
    return f"{base_url}{path}"
