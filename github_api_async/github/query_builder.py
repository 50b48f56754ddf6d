"""Build request URLs and query strings from per-endpoint parameter whitelists."""

from typing import Any, Mapping, Optional, Sequence
from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_UNRESERVED = "!*'()"

# Optional query parameters for one call
Params = Mapping[str, Any]


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def assemble_query_params(
    params: Optional[Mapping[str, Any]],
    allowed_names: Sequence[str],
    include_falsy: bool = False
) -> str:
    """
    Build a query string from the whitelisted entries of a parameter bag.

    Parameters appear in ``allowed_names`` order. Names missing from the
    whitelist are dropped, and so are falsy values (``None``, ``0``,
    ``False``, ``""``) unless ``include_falsy`` is set, in which case only
    ``None`` is dropped.

    Args:
        params: Mapping of parameter name to scalar value, or None
        allowed_names: Names this endpoint forwards
        include_falsy: Forward ``0``, ``False`` and ``""`` values

    Returns:
        Query string without a leading '?' or '&', possibly empty
    """
    if not params:
        return ""

    pairs = []
    for name in allowed_names:
        value = params.get(name)
        if value is None:
            continue
        if not value and not include_falsy:
            continue
        pairs.append(f"{name}={quote(_format_value(value), safe=_UNRESERVED)}")

    return "&".join(pairs)


def build_url(
    path: str,
    params: Optional[Mapping[str, Any]] = None,
    allowed_names: Sequence[str] = (),
    include_falsy: bool = False
) -> str:
    """Append the assembled query string to ``path`` when there is one.

    ``include_falsy`` is passed through to :func:`assemble_query_params`.
    """
    query = assemble_query_params(params, allowed_names, include_falsy)
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"
