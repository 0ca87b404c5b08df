import math
import re
from typing import NamedTuple, Optional
from teamdesk.config import settings


class PageWindow(NamedTuple):
    page: int
    limit: int
    total_pages: int
    skip: int


LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Read the leading integer of a query-string value (``"10abc"`` is 10,
    ``"2.5"`` is 2), falling back to ``default`` when there is none or it is
    not positive."""
    if value is None:
        return default
    match = LEADING_INT.match(str(value))
    if not match:
        return default
    parsed = int(match.group(1))
    return parsed if parsed > 0 else default


def page_window(total: int, page: int, limit: int) -> PageWindow:
    """Clamp ``page`` into ``[1, total_pages]`` and compute the skip offset.

    With no records there are zero pages; the window then points at page 1
    and yields nothing.
    """
    limit = min(max(limit, 1), settings.MAX_PAGE_LIMIT)
    total_pages = math.ceil(total / limit)
    page = max(1, min(page, total_pages))
    return PageWindow(page=page, limit=limit, total_pages=total_pages, skip=(page - 1) * limit)
