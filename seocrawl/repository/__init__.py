from .pages import PagesRepository
from .crawl_stats import CrawlStatsRepository

__all__ = ["PagesRepository", "CrawlStatsRepository"]
