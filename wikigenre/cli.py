#!/usr/bin/env python3
"""Command-line interface for Wikipedia genre lookup.

Prints one line of genres per query, in input order. Queries come from
the command line or, when none are given, from foobar2000 items on stdin.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, TextIO

from wikigenre import __version__
from wikigenre.core import WikigenreResolver
from wikigenre.dataclasses import BatchResult, Query, ResolutionError, WikigenreConfig
from wikigenre.errors import NoGenresFound
from wikigenre.normalizer import parse_lines, parse_tokens, read_lines


def setup_logging(debug: bool = False):
    """Configure logging for CLI."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s'
    )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='wikigenre',
        description='Look up album genres on Wikipedia',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "The Beatles - Abbey Road" "Nevermind"
  echo "Radiohead - [OK Computer CD1 #3]" | %(prog)s

Environment Variables:
  WIKIGENRE_API_URL     MediaWiki API endpoint
  WIKIGENRE_USER_AGENT  User-Agent header for requests
  WIKIGENRE_TIMEOUT     Total request timeout in seconds
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        'queries',
        nargs='*',
        metavar='[ARTIST - ]ALBUM',
        help='Albums to look up (default: read foobar2000 items from stdin)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print URIs of HTTP requests'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--api-url',
        help='MediaWiki API endpoint (default: from WIKIGENRE_API_URL env var)'
    )

    cache_group = parser.add_argument_group('cache options')
    cache_group.add_argument(
        '--cache',
        action='store_true',
        help='Cache fetched pages on disk'
    )
    cache_group.add_argument(
        '--cache-dir',
        help='Directory for cached pages (default: .wikigenre_cache)'
    )
    cache_group.add_argument(
        '--clear-cache',
        action='store_true',
        help='Clear cached pages and exit'
    )
    cache_group.add_argument(
        '--cache-info',
        action='store_true',
        help='Show cache statistics and exit'
    )

    return parser.parse_args(argv)


def create_config_from_args(args) -> WikigenreConfig:
    """Create WikigenreConfig from command-line arguments and environment variables."""
    return WikigenreConfig.from_env(
        api_url=args.api_url,
        verbose=args.verbose,
        cache_enabled=args.cache or args.clear_cache or args.cache_info,
        cache_dir=args.cache_dir,
    )


def print_cache_info(cache_info: dict) -> None:
    if not cache_info.get('cache_enabled'):
        print("Cache is disabled")
        return
    print(f"Cache directory: {cache_info.get('cache_dir', 'N/A')}")
    print(f"Total cached files: {cache_info.get('total_files', 0)}")
    print(f"Total cache size: {cache_info.get('total_size_mb', 0):.2f} MB")
    if cache_info.get('expired_files', 0) > 0:
        print(f"Expired files: {cache_info.get('expired_files', 0)}")


async def lookup_genres(queries: List[Query], config: WikigenreConfig) -> BatchResult:
    async with WikigenreResolver(config) as resolver:
        return await resolver.resolve(queries)


def report(result: BatchResult, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Write genre lines and failures, returning the exit code."""
    out = out or sys.stdout
    err = err or sys.stderr
    for error in result.errors:
        print(error, file=err)
    for raw_key in result.not_found:
        print(ResolutionError(raw_key, NoGenresFound()), file=err)
    for line in result.lines():
        print(line, file=out)
    return 0 if result.ok else 1


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    config = create_config_from_args(args)

    if args.cache_info or args.clear_cache:
        resolver = WikigenreResolver(config)
        if args.cache_info:
            print_cache_info(resolver.get_cache_info())
        else:
            print(f"Cleared {resolver.clear_cache()} cache file(s)")
        return 0

    if args.queries:
        queries = parse_tokens(args.queries)
    else:
        try:
            queries = parse_lines(read_lines(sys.stdin))
        except (OSError, UnicodeDecodeError) as e:
            print(f"error reading from stdin: {e}", file=sys.stderr)
            return 1

    try:
        result = asyncio.run(lookup_genres(queries, config))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        logger.error(f"Fatal error: {e}")
        if args.debug:
            raise
        return 1

    return report(result)


if __name__ == '__main__':
    sys.exit(main())
