"""podcache HTTP utilities.

Example:
    >>> from podcache.http import HttpClient
    >>>
    >>> async with HttpClient("http://localhost:8080/") as client:
    ...     feeds = await client.get_json("feed")
"""

from podcache.http.client import HttpClient, http_client

__all__ = [
    "HttpClient",
    "http_client",
]
