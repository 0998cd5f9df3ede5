"""Keyword memory for paginated searches.

The picker sends the keyword only with the first page; "load more"
requests carry just a page number. The keyword is remembered per
repository instance so those requests can be answered.
"""

import logging

from videorepo.session.base import SessionStore

logger = logging.getLogger(__name__)


def session_key(instance_id: str) -> str:
    """Session key holding the last keyword for a repository instance."""
    return f"{instance_id}_keyword"


def resolve_keyword(store: SessionStore, instance_id: str, keyword: str, page: int) -> str:
    """Work out which keyword a search request is for.

    A request past the first page with no keyword continues the previous
    search of the same instance. The effective keyword is always written
    back, even when it is empty.
    """
    key = session_key(instance_id)

    if page > 1 and not keyword:
        cached = store.get(key)
        if cached is not None:
            logger.debug(f"Reusing keyword {cached!r} for {instance_id} page {page}")
            keyword = cached

    store.set(key, keyword)
    return keyword
