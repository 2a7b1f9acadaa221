"""
find_hot_topic.py
~~~~~~~~~~~~~~~~~

CLI command that finds the **most viewed topic** of a collection of videos.

Workflow
--------
1. Read the videos from a JSON file (default ``videos.json``).
2. Sum views, likes and dislikes of the videos by topic.
3. Print the topic with the highest views count.

See :class:`topic_aggregator.TopicAggregator` for the aggregation details.
"""

import argparse
import logging
from logging import Logger
from time import perf_counter
from typing import List, Optional, Tuple

import dotenv
from rich.console import Console
from rich.logging import RichHandler

from errors import EmptyResult, HotTopicError
from hot_topic_report import HotTopicReport
from hot_topic_settings import HotTopicSettings
from topic_aggregator import TopicAggregator
from video_records import load_video_records


EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FILE_NOT_FOUND = 2


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Drives the hot topic search, returns the process exit code."""

    settings, clock_start, logger = setup(argv)
    logger.info(f"--> Started looking for the hot topic in {settings.videos_file} ...")

    aggregator = TopicAggregator(logger, show_progress=settings.show_progress)
    report = HotTopicReport(console or Console())

    try:
        videos = load_video_records(settings.videos_file)
        result = aggregator.aggregate(videos)

        if result.is_empty:
            if settings.fail_on_empty:
                raise EmptyResult(f"No topic found in {settings.videos_file}")
            logger.warning(f"No topic found in {settings.videos_file}.")

        report.render(result)
    except FileNotFoundError:
        logger.error(f"Videos file not found: {settings.videos_file}")
        return EXIT_FILE_NOT_FOUND
    except HotTopicError:
        logger.exception("Hot topic search failed!")
        return EXIT_ERROR

    # Finalizing
    run_time_secs = perf_counter() - clock_start
    logger.info(f"<-- Done looking for the hot topic in {run_time_secs} sec.")
    return EXIT_OK


def setup(argv: Optional[List[str]] = None) -> Tuple[HotTopicSettings, float, Logger]:
    """
    Setup chores: loads env. variables, parses the command line, creates a logger...

    Returns
    -------
        * Settings of the hot topic finder.
        * Clock start time.
        * A configured logger.
    """
    clock_start = perf_counter()
    dotenv.load_dotenv(override=True)

    args = parse_args(argv)
    settings = HotTopicSettings()
    overrides = {}
    if args.videos_file:
        overrides["videos_file"] = args.videos_file
    if args.verbose:
        overrides["verbose"] = True
    if args.progress:
        overrides["show_progress"] = True
    if args.fail_on_empty:
        overrides["fail_on_empty"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)

    logger = create_logger(settings.verbose)

    return settings, clock_start, logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the topic with the highest total views count."
    )
    parser.add_argument(
        "videos_file",
        nargs="?",
        default=None,
        help="JSON file listing the videos (default: HOT_TOPIC_VIDEOS_FILE or videos.json).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug messages.")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar.")
    parser.add_argument(
        "--fail-on-empty",
        action="store_true",
        help="Exit with an error when no topic is found.",
    )
    return parser.parse_args(argv)


def create_logger(verbose: bool = False) -> Logger:
    """Creates a preconfigured logger."""
    logger = logging.getLogger("hot_topic_finder")
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    rich_handler = RichHandler(show_time=False, show_path=False, rich_tracebacks=True)
    logging.basicConfig(
        level=log_level,
        encoding="utf8",
        format="%(asctime)s[%(levelname)s]: %(message)s",
        datefmt="%m/%d/%Y %H:%M:%S",
        handlers=[rich_handler],
    )
    logger.setLevel(log_level)

    return logger


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
