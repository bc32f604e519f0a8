from __future__ import annotations


from sqlalchemy import Column, Integer, String, Float, Text, DateTime, func
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class Page(Base):
    __tablename__ = "pages"

    page_id = Column(Integer, primary_key=True)
    page_url = Column(Text, unique=True, nullable=False)
    title = Column(String(500), nullable=True)
    h1 = Column(String(500), nullable=True)
    meta_description = Column(String(1000), nullable=True)
    status_code = Column(Integer, nullable=True, index=True)
    crawled_at = Column(DateTime, nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now())


class CrawlStats(Base):
    __tablename__ = "crawl_stats"

    stats_id = Column(Integer, primary_key=True)
    total_pages = Column(Integer, nullable=False, default=0)
    success_pages = Column(Integer, nullable=False, default=0)
    failed_pages = Column(Integer, nullable=False, default=0)
    duration_seconds = Column(Float, nullable=False, default=0.0)
    start_url = Column(Text, nullable=False)
    crawled_at = Column(DateTime, nullable=False)
