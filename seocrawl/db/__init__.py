from .models import Base, Page, CrawlStats
from .engine import make_engine

__all__ = ["Base", "Page", "CrawlStats", "make_engine"]
