from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from seocrawl.db.models import Page as DBPage
from seocrawl.domain import PageRecord
from seocrawl.utils.datetime_utils import to_utc_naive

TITLE_MAX = 500
H1_MAX = 500
META_DESCRIPTION_MAX = 1000


class PagesRepository:
    """Repository for Page database operations.

    Requires an explicit `session_factory` (callable returning a `Session`).
    """
    def __init__(self, session_factory):
        self.session_factory = session_factory

    @staticmethod
    def _sanitize_text(val: Optional[str], max_len: int) -> Optional[str]:
        """Strip NUL characters and clip to the column size."""
        if isinstance(val, str):
            return val.replace("\x00", "")[:max_len]
        return val

    def get_session(self) -> Session:
        return self.session_factory()

    def _to_domain(self, db_page: DBPage) -> PageRecord:
        return PageRecord(
            url=db_page.page_url,
            title=db_page.title,
            h1=db_page.h1,
            meta_description=db_page.meta_description,
            status_code=db_page.status_code,
            crawled_at=db_page.crawled_at,
        )

    def _apply(self, db_page: DBPage, record: PageRecord) -> None:
        db_page.title = self._sanitize_text(record.title, TITLE_MAX)
        db_page.h1 = self._sanitize_text(record.h1, H1_MAX)
        db_page.meta_description = self._sanitize_text(record.meta_description, META_DESCRIPTION_MAX)
        db_page.status_code = record.status_code
        db_page.crawled_at = to_utc_naive(record.crawled_at)

    def upsert_page(self, record: PageRecord) -> int:
        """Insert or update the page row keyed by `record.url`; return its page_id."""
        with self.get_session() as session:
            q = select(DBPage).where(DBPage.page_url == record.url)
            p = session.execute(q).scalars().first()
            if p is None:
                p = DBPage(page_url=record.url)
                session.add(p)
            self._apply(p, record)
            # Another writer may have inserted the same URL between select and
            # commit; fall back to updating that row.
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                existing = session.execute(q).scalars().first()
                if existing is None:
                    raise
                self._apply(existing, record)
                session.commit()
                return existing.page_id
            return p.page_id

    def get_page_by_url(self, page_url: str) -> Optional[PageRecord]:
        with self.get_session() as session:
            q = select(DBPage).where(DBPage.page_url == page_url)
            p = session.execute(q).scalars().first()
            if not p:
                return None
            return self._to_domain(p)

    def fetch_pages(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[PageRecord]:
        with self.get_session() as session:
            q = select(DBPage).order_by(DBPage.page_id)
            if offset:
                q = q.offset(offset)
            if limit:
                q = q.limit(limit)
            rows = session.execute(q).scalars().all()
            return [self._to_domain(row) for row in rows]

    def count_pages(self) -> int:
        with self.get_session() as session:
            return session.execute(select(func.count(DBPage.page_id))).scalar_one()
