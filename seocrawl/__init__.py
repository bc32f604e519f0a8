"""seocrawl - concurrent SEO crawler."""

__version__ = "0.1.0"
