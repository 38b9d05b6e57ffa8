"""HTTP clients for taxjar.

Provides a blocking and a non-blocking client with the same methods, both
built on :mod:`httpx`:

    :class:`Client` -- blocking client backed by :class:`httpx.Client`.
    :class:`AsyncClient` -- non-blocking client backed by :class:`httpx.AsyncClient`.

Request building (:mod:`taxjar.client.request`) and response classification
(:mod:`taxjar.client.response`) are shared, so both clients encode
parameters and report errors identically.

Example::

    from taxjar.client import Client

    with Client(api_key="...") as client:
        categories = client.categories()
"""

from taxjar.client.async_client import AsyncClient
from taxjar.client.sync_client import Client

__all__ = ["Client", "AsyncClient"]
