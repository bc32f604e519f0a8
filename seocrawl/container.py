"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests
from sqlalchemy.orm import sessionmaker

from seocrawl import config as env
from seocrawl.db.engine import make_engine
from seocrawl.repository.pages import PagesRepository
from seocrawl.repository.crawl_stats import CrawlStatsRepository
from seocrawl.services.crawl_runner import CrawlRunner
from seocrawl.services.crawl_store import SqlCrawlStore
from seocrawl.services.http_service import HttpService
from seocrawl.services.link_extractor import LinkExtractor
from seocrawl.services.page_parser import SeoPageParser


# Environment variables used by the container (read via `seocrawl.config` helpers).
#
# DATABASE_URL (str | optional)
#   SQLAlchemy URL. When unset, a timestamped SQLite file
#   (crawler_YYYYMMDD_HHMMSS.db) in the working directory is used.
#
# USER_AGENT (str | optional)
#   Fixed User-Agent header. When unset, each request picks one of a small
#   pool of desktop browser agents.
#
# SEED_URL (str, default: "http://books.toscrape.com")
#   Address discovery starts from.
#
# MAX_URLS (int, default: 100)
#   Upper bound on URLs admitted for crawling in one run.
#
# WORKER_COUNT (int, default: 5)
#   Number of scrape worker threads.
#
# WORKLIST_CAPACITY (int, default: 100)
#   Bounded hand-off queue size between discovery and workers.
#
# DISCOVERY_TIMEOUT (float seconds, default: 10)
#   Per-request timeout during discovery.
#
# SCRAPE_TIMEOUT (float seconds, default: 30)
#   Per-request timeout for worker scrapes.
#
# MAX_DISCOVERY_BRANCHES (int | optional)
#   Caps discovery branches fetching at once. Unset means unbounded.
ENV = {
    "DATABASE_URL": env.DATABASE_URL,
    "USER_AGENT": env.USER_AGENT,
    "SEED_URL": env.SEED_URL,
    "MAX_URLS": env.MAX_URLS,
    "WORKER_COUNT": env.WORKER_COUNT,
    "WORKLIST_CAPACITY": env.WORKLIST_CAPACITY,
    "DISCOVERY_TIMEOUT": env.DISCOVERY_TIMEOUT,
    "SCRAPE_TIMEOUT": env.SCRAPE_TIMEOUT,
    "MAX_DISCOVERY_BRANCHES": env.MAX_DISCOVERY_BRANCHES,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the seocrawl application."""

    config = providers.Configuration(default=ENV)

    # Database engine - Singleton to reuse connection pool
    db_engine = providers.Singleton(
        make_engine,
        database_url=config.DATABASE_URL,
    )
    session_factory = providers.Singleton(
        sessionmaker,
        bind=db_engine,
        future=True,
    )

    pages_repository = providers.Singleton(
        PagesRepository,
        session_factory=session_factory,
    )

    crawl_stats_repository = providers.Singleton(
        CrawlStatsRepository,
        session_factory=session_factory,
    )

    crawl_store = providers.Singleton(
        SqlCrawlStore,
        engine=db_engine,
        pages_repo=pages_repository,
        stats_repo=crawl_stats_repository,
    )

    http_service = providers.Singleton(
        HttpService,
        http_client=providers.Object(requests.get),
        user_agent=config.USER_AGENT,
        timeout=config.DISCOVERY_TIMEOUT.as_(float),
    )

    link_extractor = providers.Singleton(LinkExtractor)

    page_parser = providers.Singleton(SeoPageParser)

    # One runner per crawl
    crawl_runner = providers.Factory(
        CrawlRunner,
        transport=http_service,
        link_extractor=link_extractor,
        page_parser=page_parser,
        store=crawl_store,
        discovery_timeout=config.DISCOVERY_TIMEOUT.as_(float),
        scrape_timeout=config.SCRAPE_TIMEOUT.as_(float),
        max_concurrent_branches=config.MAX_DISCOVERY_BRANCHES,
    )
