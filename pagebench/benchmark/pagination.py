"""Pagination strategies: how to request the next page and when to stop."""
import logging
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

from .exceptions import PaginationError
from .field_extractor import FieldExtractor
from .models import EndpointSpec, PageOutcome, PaginationState, PaginationStyle


logger = logging.getLogger(__name__)


class PaginationCursor(ABC):
    """Walks one endpoint's pages.

    Cursors hold no position themselves: every call takes the current
    PaginationState and returns the next one, so a cursor can be shared
    between sampling and traversal runs.
    """

    def __init__(self, endpoint: EndpointSpec, page_size: int, extractor: FieldExtractor):
        self.endpoint = endpoint
        self.page_size = page_size
        self.extractor = extractor

    @abstractmethod
    def initial_state(self) -> PaginationState:
        """State pointing at the first page."""

    @abstractmethod
    def advance(self, state: PaginationState, document: Any) -> PageOutcome:
        """Inspect the page fetched for ``state`` and decide what comes next."""

    def build_url(self, base_url: str, state: PaginationState) -> str:
        """Append the pagination parameter to the endpoint path."""
        separator = "&" if "?" in self.endpoint.path else "?"
        position = quote(str(state.position), safe="")
        return f"{base_url}{self.endpoint.path}{separator}{self.endpoint.param_name}={position}"


class OffsetPaginationCursor(PaginationCursor):
    """Page-index pagination terminated by a missing next link or a short page."""

    def initial_state(self) -> PaginationState:
        return PaginationState(PaginationStyle.OFFSET, 0)

    def advance(self, state: PaginationState, document: Any) -> PageOutcome:
        count = self.extractor.extract_count(self.endpoint.count_expr, document)
        has_next = self.extractor.extract_has_next(self.endpoint.has_next_expr, document)
        if not has_next or count < self.page_size:
            return PageOutcome(item_count=count, next_state=None)
        return PageOutcome(
            item_count=count,
            next_state=PaginationState(PaginationStyle.OFFSET, int(state.position) + 1),
        )


class CursorPaginationCursor(PaginationCursor):
    """Keyset pagination: the next cursor comes from the last item of the page."""

    def initial_state(self) -> PaginationState:
        return PaginationState(PaginationStyle.CURSOR, self.endpoint.initial_cursor)

    def advance(self, state: PaginationState, document: Any) -> PageOutcome:
        count = self.extractor.extract_count(self.endpoint.count_expr, document)
        if count == 0:
            # An empty page ends the walk and is not a visited page
            return PageOutcome(item_count=0, next_state=None, counted=False)
        if count < self.page_size:
            return PageOutcome(item_count=count, next_state=None)

        cursor = self.extractor.extract_cursor(self.endpoint.cursor_expr, document)
        if cursor is None:
            raise PaginationError(
                f"{self.endpoint.display_name}: cursor expression {self.endpoint.cursor_expr!r} "
                f"selected nothing on a full page (cursor {state.position})",
                endpoint_key=self.endpoint.key,
            )
        return PageOutcome(item_count=count, next_state=PaginationState(PaginationStyle.CURSOR, cursor))


def create_cursor(endpoint: EndpointSpec, page_size: int, extractor: FieldExtractor) -> PaginationCursor:
    """Pick the cursor implementation for the endpoint's pagination style."""
    if endpoint.style is PaginationStyle.OFFSET:
        return OffsetPaginationCursor(endpoint, page_size, extractor)
    return CursorPaginationCursor(endpoint, page_size, extractor)
