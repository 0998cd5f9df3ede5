"""Assembly of the host listing envelope."""

from videorepo.models import ListingResponse, PageResult


def build_listing(result: PageResult, page: int) -> ListingResponse:
    """Wrap a page of entries in the envelope the file picker expects.

    The picker keeps asking for more while ``pages`` is ahead of ``page``,
    so the last page reports itself as the total.
    """
    return ListingResponse(
        page=page,
        pages=page if result.is_last_page else page + 1,
        entries=list(result.entries),
    )
