from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from seocrawl.db.models import CrawlStats as DBCrawlStats
from seocrawl.domain import CrawlStatistics
from seocrawl.utils.datetime_utils import to_utc_naive


class CrawlStatsRepository:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def get_session(self) -> Session:
        return self.session_factory()

    def insert_stats(self, stats: CrawlStatistics) -> int:
        with self.get_session() as session:
            row = DBCrawlStats(
                total_pages=stats.total_pages,
                success_pages=stats.success_pages,
                failed_pages=stats.failed_pages,
                duration_seconds=stats.duration_seconds,
                start_url=stats.start_url,
                crawled_at=to_utc_naive(stats.crawled_at),
            )
            session.add(row)
            session.commit()
            return row.stats_id

    def list_stats(self) -> List[CrawlStatistics]:
        with self.get_session() as session:
            rows = session.execute(select(DBCrawlStats).order_by(DBCrawlStats.stats_id)).scalars().all()
            return [
                CrawlStatistics(
                    total_pages=r.total_pages,
                    success_pages=r.success_pages,
                    failed_pages=r.failed_pages,
                    duration_seconds=r.duration_seconds,
                    start_url=r.start_url,
                    crawled_at=r.crawled_at,
                )
                for r in rows
            ]
