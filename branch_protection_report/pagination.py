"""
Link-header pagination for the GitHub REST API.

GitHub advertises further pages in a ``Link`` header made of
comma-separated ``<url>; rel="relation"`` entries. The walker follows the
``next`` relation until the server stops advertising one.
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from branch_protection_report.exceptions import ApiError
from branch_protection_report.logging import get_logger

if TYPE_CHECKING:
    from branch_protection_report.transport import HTTPTransport

PAGE_SIZE = 100

_logger = get_logger("http")


def parse_link_header(value: str | None) -> dict[str, str]:
    """
    Parse a ``Link`` header into a relation -> URL mapping.

    Entries without a ``rel`` parameter or without an angle-bracketed URL
    are ignored. When a relation repeats, the first entry wins.

    Args:
        value: Raw header value, or None when the header is absent

    Returns:
        Mapping such as ``{"next": "https://...", "last": "https://..."}``
    """
    links: dict[str, str] = {}
    if not value:
        return links

    for entry in value.split(","):
        parts = entry.strip().split(";")
        target = parts[0].strip()
        if not (target.startswith("<") and target.endswith(">")):
            continue
        url = target[1:-1]

        for param in parts[1:]:
            key, _, raw = param.strip().partition("=")
            if key.strip().lower() != "rel":
                continue
            for rel in raw.strip().strip('"').split():
                links.setdefault(rel, url)

    return links


def next_link(value: str | None) -> str | None:
    """Return the ``rel="next"`` URL of a ``Link`` header, if any."""
    return parse_link_header(value).get("next")


class Paginator:
    """Follows ``rel="next"`` cursors and accumulates list-typed pages."""

    def __init__(self, transport: "HTTPTransport", page_size: int = PAGE_SIZE) -> None:
        """
        Initialize the paginator.

        Args:
            transport: HTTP transport for making requests
            page_size: Value sent as ``per_page`` on the first request
        """
        self.transport = transport
        self.page_size = page_size

    def iter_pages(
        self, url: str, params: dict[str, Any] | None = None
    ) -> Iterator[list[Any]]:
        """
        Yield each page's items in server order.

        ``per_page`` is only added to the first request; the cursor URLs
        GitHub returns already carry every query parameter.

        Args:
            url: Starting path or URL
            params: Query parameters for the first request

        Raises:
            ApiError: If a page body is not a JSON array
        """
        current: str | None = url
        current_params: dict[str, Any] | None = {"per_page": self.page_size, **(params or {})}
        page = 0

        while current:
            response = self.transport.get(current, params=current_params)
            items = response.json()
            if not isinstance(items, list):
                raise ApiError(
                    "UNEXPECTED_PAGE",
                    f"Expected a list from {current}, got {type(items).__name__}",
                    response.status_code,
                )

            page += 1
            _logger.debug("Page %d of %s: %d items", page, url, len(items))
            yield items

            current = next_link(response.headers.get("link"))
            current_params = None

    def walk(self, url: str, params: dict[str, Any] | None = None) -> list[Any]:
        """
        Fetch every page starting at ``url`` and concatenate them.

        Args:
            url: Starting path or URL
            params: Query parameters for the first request

        Returns:
            All items from all pages, in page order
        """
        items: list[Any] = []
        for page in self.iter_pages(url, params):
            items.extend(page)
        return items
