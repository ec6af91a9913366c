"""Client-side incremental pagination over one search result set."""

from nasadash.models import GalleryItem, GalleryResultSet

PAGE_STEP = 6


class GalleryPaginator:
    """Holds the current result set and how much of it is visible.

    visible_count only grows while a result set is installed and never
    exceeds either page_size or the size of the set.
    """

    def __init__(self) -> None:
        self._result_set: GalleryResultSet = ()
        self._page_size = PAGE_STEP
        self._visible_count = 0

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def visible_count(self) -> int:
        return self._visible_count

    @property
    def total(self) -> int:
        return len(self._result_set)

    @property
    def has_more(self) -> bool:
        return self._visible_count < len(self._result_set)

    def install(self, new_set: GalleryResultSet) -> None:
        """Replace the result set and rewind the window to the first page."""
        self._result_set = tuple(new_set)
        self._page_size = PAGE_STEP
        self._visible_count = min(PAGE_STEP, len(self._result_set))

    def clear(self) -> None:
        self.install(())

    def load_more(self) -> None:
        """Reveal the next page. No-op once everything is visible."""
        if not self.has_more:
            return
        self._page_size += PAGE_STEP
        self._visible_count = min(self._page_size, len(self._result_set))

    def visible_items(self) -> tuple[GalleryItem, ...]:
        return self._result_set[: self._visible_count]
