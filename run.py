"""Command-line entry point: crawl a static site map described by YAML files.

    python run.py crawl.yml --site-map pages.yml

The site map may also live in the config file itself under a ``pages`` key.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from dependency_injector import providers

from wordcrawl import config as env
from wordcrawl.container import Container
from wordcrawl.exceptions import CrawlConfigError
from wordcrawl.services.crawl_result_writer import CrawlResultWriter
from wordcrawl.services.in_memory_page_parser import InMemoryPageParser

logger = logging.getLogger("wordcrawl.run")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Concurrent word-count crawler")
    parser.add_argument("config", help="YAML crawl configuration")
    parser.add_argument("--site-map", dest="site_map", default=None, help="YAML file with a 'pages' mapping")
    parser.add_argument("--log-level", dest="log_level", default=env.LOG_LEVEL)
    return parser


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    container = container or Container()

    store = container.config_file_store()
    data = store.load_yaml_dict(args.config)
    if data is None:
        logger.error("Config %s is missing or not a YAML mapping", args.config)
        return 2
    try:
        crawl_config = container.config_parser().parse(data=data, config_path=args.config)
    except CrawlConfigError as e:
        logger.error("%s", e)
        return 2

    site_map = data
    if args.site_map:
        site_map = store.load_yaml_dict(args.site_map)
        if site_map is None:
            logger.error("Site map %s is missing or not a YAML mapping", args.site_map)
            return 2
    try:
        page_parser = InMemoryPageParser.from_site_map(site_map, crawl_config.ignored_words)
    except CrawlConfigError as e:
        logger.error("%s", e)
        return 2
    container.page_parser.override(providers.Object(page_parser))

    profiler = container.profiler()
    crawler = container.profiled_crawler()
    result = crawler.crawl_config(crawl_config)
    for failure in result.failures:
        logger.warning("Seed %s failed: %s", failure.seed_url, failure.error)

    writer = CrawlResultWriter(result)
    if crawl_config.result_path:
        writer.write(crawl_config.result_path)
    else:
        writer.write_to(sys.stdout)

    if crawl_config.profile_output_path:
        profiler.write_data(crawl_config.profile_output_path)
    else:
        profiler.write_to(sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
