"""Sparse bitmap backed by lazily allocated pages."""

from dataclasses import dataclass
from typing import Dict, Optional
import mmap
import threading

import structlog

logger = structlog.get_logger()

BITS_PER_BYTE = 8
PAGE_SIZE = mmap.PAGESIZE
BITS_PER_PAGE = BITS_PER_BYTE * PAGE_SIZE


@dataclass
class BitmapOptions:
    """Options used to construct a Bitmap."""
    # Initial capacity in bits, only enforced when auto_expand is off
    capacity: int = 0
    # Allocate pages for bits beyond the current capacity
    auto_expand: bool = True
    # Release a page as soon as its last bit is cleared
    auto_recycle: bool = True


class _Page:
    __slots__ = ("bits", "count")

    def __init__(self):
        self.bits = bytearray(PAGE_SIZE)
        self.count = 0


class Bitmap:
    """
    Thread-safe sparse bitmap.

    Bit indices start at 1. Storage is split into pages of BITS_PER_PAGE bits
    that are only allocated when a bit inside them is first set.
    """

    def __init__(self, options: Optional[BitmapOptions] = None):
        if options is None:
            options = BitmapOptions()
        self._options = BitmapOptions(options.capacity, options.auto_expand, options.auto_recycle)
        self._pages: Dict[int, _Page] = {}
        self._size = 0
        self._lock = threading.Lock()

    def set_bit(self, n: int) -> None:
        """Set bit n. Ignored when n is out of range and auto-expand is off."""
        with self._lock:
            page = self._get_page(n, create=True)
            if page is None:
                return

            idx, mask = self._locate(n)
            if not page.bits[idx] & mask:
                page.bits[idx] |= mask
                page.count += 1
                self._size += 1

    def clear_bit(self, n: int) -> None:
        """Clear bit n."""
        with self._lock:
            page = self._get_page(n, create=False)
            if page is None:
                return

            idx, mask = self._locate(n)
            if page.bits[idx] & mask:
                page.bits[idx] &= ~mask & 0xFF
                page.count -= 1
                self._size -= 1

                if page.count == 0 and self._options.auto_recycle:
                    del self._pages[self._page_index(n)]

    def test(self, n: int) -> bool:
        """Test whether bit n is set."""
        with self._lock:
            page = self._get_page(n, create=False)
            if page is None:
                return False

            idx, mask = self._locate(n)
            return bool(page.bits[idx] & mask)

    def clear_all(self) -> None:
        """Zero every bit. Allocated pages are kept for reuse."""
        with self._lock:
            for page in self._pages.values():
                page.bits[:] = bytes(PAGE_SIZE)
                page.count = 0
            self._size = 0

    def size(self) -> int:
        """Total count of bits set."""
        with self._lock:
            return self._size

    def gc(self) -> None:
        """Release pages that hold no set bits."""
        with self._lock:
            empty = [page_id for page_id, page in self._pages.items() if page.count == 0]
            for page_id in empty:
                del self._pages[page_id]

        logger.debug("Recycled bitmap pages", pages=len(empty))

    def capacity(self) -> int:
        """How many bits can be addressed without allocating another page."""
        with self._lock:
            if not self._options.auto_expand:
                return self._options.capacity

            if not self._pages:
                return 0
            return (max(self._pages) + 1) * BITS_PER_PAGE

    def _get_page(self, n: int, create: bool) -> Optional[_Page]:
        if n < 1:
            raise ValueError(f"bit index must be >= 1, got {n}")

        if n > self._options.capacity and not self._options.auto_expand:
            return None

        page_id = self._page_index(n)
        page = self._pages.get(page_id)
        if page is None and create:
            page = self._pages[page_id] = _Page()
        return page

    @staticmethod
    def _page_index(n: int) -> int:
        return (n - 1) // BITS_PER_PAGE

    @staticmethod
    def _locate(n: int):
        offset = (n - 1) % BITS_PER_PAGE
        return offset // BITS_PER_BYTE, 1 << (offset % BITS_PER_BYTE)
