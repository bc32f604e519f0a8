"""Domain objects for seocrawl - explicit re-exports to satisfy linters."""
from .http_response import HttpResponse as HttpResponse
from .page_record import PageRecord as PageRecord
from .crawl_statistics import CrawlStatistics as CrawlStatistics
from .crawl_settings import CrawlSettings as CrawlSettings
from .frontier import Frontier as Frontier

__all__ = ["HttpResponse", "PageRecord", "CrawlStatistics", "CrawlSettings", "Frontier"]
