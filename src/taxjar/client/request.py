"""Request builder -- turns an :class:`~taxjar.operations.Operation` into a
:class:`PreparedRequest`.

Both :class:`~taxjar.client.Client` and :class:`~taxjar.client.AsyncClient`
call :func:`build_request`; neither adds headers, query parameters, or body
content of its own.

Encoding rules:

- Every request carries ``Authorization: Bearer <api_key>`` and asks for
  JSON.
- ``GET`` parameters are flattened into the query string, one pair per
  field, with ``str(value)`` as the value.  Only scalar values are allowed.
- Parameters of every other verb are sent only as the JSON body.
- A ``GET`` with parameters *also* carries them as a JSON body.  The
  service ignores it; it is kept for wire compatibility with older clients.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from taxjar import __version__
from taxjar.exceptions import InvalidParametersError
from taxjar.models import Credentials, HTTPMethod

if TYPE_CHECKING:
    from taxjar.operations import Operation

USER_AGENT = f"taxjar-python/{__version__}"

_SCALAR_TYPES = (str, int, float, bool)


@dataclass(frozen=True)
class PreparedRequest:
    """A fully-formed request, ready to hand to an :mod:`httpx` client.

    Attributes:
        method: HTTP verb.
        url: Absolute URL (base URL + operation path).
        headers: Request headers, including ``Authorization``.
        params: Query-string pairs (``GET`` only).
        json_body: JSON-serialisable body, or ``None`` for no body.
    """

    method: HTTPMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    json_body: Optional[dict[str, Any]] = None

    def to_httpx_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``httpx.Client.request`` / ``httpx.AsyncClient.request``."""
        kwargs: dict[str, Any] = {
            "method": self.method.value,
            "url": self.url,
            "headers": self.headers,
        }
        if self.params:
            kwargs["params"] = self.params
        if self.json_body is not None:
            kwargs["json"] = self.json_body
        return kwargs


def build_request(operation: Operation, credentials: Credentials) -> PreparedRequest:
    """Build the authenticated request for *operation*.

    Args:
        operation: The operation to execute.
        credentials: API key and base URL of the calling client.

    Returns:
        The :class:`PreparedRequest`.

    Raises:
        InvalidParametersError: If a ``GET`` parameter is not a scalar.
    """
    headers = {
        "Authorization": f"Bearer {credentials.api_key}",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
    params = operation.params

    query: dict[str, str] = {}
    if operation.method == HTTPMethod.GET and params:
        query = _flatten_query(params)

    return PreparedRequest(
        method=operation.method,
        url=f"{credentials.api_url}{operation.path}",
        headers=headers,
        params=query,
        json_body=dict(params) if params is not None else None,
    )


def _flatten_query(params: dict[str, Any]) -> dict[str, str]:
    """Map each scalar parameter to its string form, skipping ``None``."""
    query: dict[str, str] = {}
    for name, value in params.items():
        if value is None:
            continue
        if not isinstance(value, _SCALAR_TYPES):
            raise InvalidParametersError(
                f"Query parameter '{name}' must be a scalar, got {type(value).__name__}"
            )
        query[name] = str(value)
    return query
