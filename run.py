import logging
import sys
from typing import Optional

from seocrawl import config
from seocrawl.container import Container
from seocrawl.exceptions import CrawlConfigError, StoreInitError

logger = logging.getLogger("seocrawl")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main(container: Optional[Container] = None) -> int:
    setup_logging(config.LOG_LEVEL)
    container = container or Container()

    seed_url = container.config.SEED_URL()
    runner = container.crawl_runner()
    try:
        stats = runner.run_crawl(
            seed_url,
            max_admissions=container.config.MAX_URLS(),
            worker_count=container.config.WORKER_COUNT(),
            worklist_capacity=container.config.WORKLIST_CAPACITY(),
        )
    except CrawlConfigError as e:
        logger.error("Invalid crawl settings: %s", e)
        return 1
    except StoreInitError as e:
        logger.error("failed to connect database: %s", e)
        return 1

    logger.info(
        "Crawl of %s finished: %d pages, %d ok, %d failed in %.1fs",
        stats.start_url,
        stats.total_pages,
        stats.success_pages,
        stats.failed_pages,
        stats.duration_seconds,
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
