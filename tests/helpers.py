"""Page builders and a scripted request executor shared by the tests."""

import json
from typing import Any, Dict, List

from pagebench.benchmark.models import HttpResponse
from tests.test_const import CURSOR_PATH, ELAPSED_MS, HTTP_SUCCESS, OFFSET_PATH, TEST_BASE_URL


def hal_page(first_id: int, count: int, has_next: bool) -> Dict[str, Any]:
    """HAL-style offset page holding ``count`` items."""
    page = {"_embedded": {"items": [{"id": first_id + i} for i in range(count)]}, "_links": {"self": {"href": "x"}}}
    if has_next:
        page["_links"]["next"] = {"href": "next"}
    return page


def cursor_page(first_id: int, count: int) -> List[Dict[str, Any]]:
    """Bare-array keyset page holding ``count`` items."""
    return [{"id": first_id + i} for i in range(count)]


def build_offset_pages(counts: List[int], base_url: str = TEST_BASE_URL, path: str = OFFSET_PATH) -> Dict[str, Any]:
    """Map page URLs to HAL documents; the last page carries no next link."""
    separator = "&" if "?" in path else "?"
    pages = {}
    first_id = 1
    for index, count in enumerate(counts):
        pages[f"{base_url}{path}{separator}page={index}"] = hal_page(first_id, count, index < len(counts) - 1)
        first_id += count
    return pages


def build_cursor_pages(counts: List[int], base_url: str = TEST_BASE_URL, path: str = CURSOR_PATH) -> Dict[str, Any]:
    """Map afterId URLs to keyset pages, each cursor being the previous page's last id."""
    separator = "&" if "?" in path else "?"
    pages = {}
    after = 0
    for count in counts:
        pages[f"{base_url}{path}{separator}afterId={after}"] = cursor_page(after + 1, count)
        after += count
    return pages


class ScriptedExecutor:
    """Stands in for RequestExecutor, answering from a URL to document map."""

    def __init__(self, pages: Dict[str, Any], default: Any = None, elapsed_ms: float = ELAPSED_MS,
                 status_code: int = HTTP_SUCCESS):
        self.pages = pages
        self.default = default
        self.elapsed_ms = elapsed_ms
        self.status_code = status_code
        self.urls: List[str] = []

    def send_request(self, session, url: str, check_status: bool = False) -> HttpResponse:
        self.urls.append(url)
        document = self.pages.get(url, self.default)
        body = document if isinstance(document, bytes) else json.dumps(document).encode()
        return HttpResponse(url=url, status_code=self.status_code, body=body, elapsed_ms=self.elapsed_ms)


