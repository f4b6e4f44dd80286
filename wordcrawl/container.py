"""Dependency injection container for the application."""
from dependency_injector import containers, providers

from wordcrawl import config as env
from wordcrawl.profiler import Profiler
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser
from wordcrawl.services.in_memory_page_parser import InMemoryPageParser
from wordcrawl.services.parallel_crawler import ParallelCrawler
from wordcrawl.utils.clock import SystemClock


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# WORDCRAWL_PARALLELISM (int | optional)
#   Upper bound on crawl worker threads. Always capped at the CPU count.
#   Unset means "use every CPU".
#
# WORDCRAWL_FAIL_FAST (bool, default: false)
#   When true a parse failure under any seed aborts the whole crawl.
#   Otherwise failures are isolated per seed URL.
#
# WORDCRAWL_CONFIGS_DIR (str, default: ".")
#   Base directory for relative config / site map paths.
#
# WORDCRAWL_DEFAULT_DEPTH, WORDCRAWL_TIMEOUT_SECONDS, WORDCRAWL_POPULAR_WORD_COUNT
#   Defaults applied by `CrawlerConfigParser` for keys missing from a config file.
ENV = {
    "WORDCRAWL_PARALLELISM": env.DEFAULT_PARALLELISM,
    "WORDCRAWL_FAIL_FAST": env.DEFAULT_FAIL_FAST,
    "WORDCRAWL_CONFIGS_DIR": env.get_str_env("WORDCRAWL_CONFIGS_DIR", "."),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for wordcrawl."""

    config = providers.Configuration(default=ENV)

    clock = providers.Singleton(SystemClock)

    config_file_store = providers.Singleton(
        ConfigFileStore,
        configs_dir=config.WORDCRAWL_CONFIGS_DIR.as_(str),
    )

    config_parser = providers.Singleton(CrawlerConfigParser)

    # Overridden by callers with the site map they want to crawl.
    page_parser = providers.Singleton(InMemoryPageParser, pages={})

    profiler = providers.Singleton(Profiler, clock=clock)

    crawler = providers.Factory(
        ParallelCrawler,
        parser=page_parser,
        clock=clock,
        parallelism=config.WORDCRAWL_PARALLELISM,
        fail_fast=config.WORDCRAWL_FAIL_FAST,
    )

    profiled_crawler = providers.Callable(
        lambda p, c: p.wrap(c),
        profiler,
        crawler,
    )
