"""
Run the catalog service.

Usage:
    python -m catalog_service                 # listen on the configured port
    python -m catalog_service --port 8080     # override the port
    python -m catalog_service --reload        # development auto-reload
"""
import argparse
from typing import Optional

import uvicorn

from catalog_service.config import get_settings
from catalog_service.core.logging import get_logger, setup_logging

EXAMPLES = [
    "Query books: { books { id title author available } }",
    "Query users: { users { id name borrowedBooks { title } } }",
    'Add book: mutation { addBook(input: {title: "...", author: "..."}) { id title } }',
    'Borrow book: mutation { borrowBook(userId: "1", bookId: "1") { id title available } }',
]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="catalog-service",
        description="In-memory library and content catalogs over GraphQL",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser.parse_args(argv)


def print_banner(host: str, port: int) -> None:
    """Log the endpoint URLs and a few example operations."""
    settings = get_settings()
    logger = get_logger("cli")
    shown_host = "localhost" if host in ("0.0.0.0", "") else host
    base = f"http://{shown_host}:{port}"
    logger.info("=" * 50)
    logger.info("GraphQL server is running")
    logger.info("Library: %s%s", base, settings.graphql_path)
    logger.info("Content: %s%s", base, settings.content_graphql_path)
    logger.info("=" * 50)
    logger.info("Available operations:")
    for number, example in enumerate(EXAMPLES, start=1):
        logger.info("%d. %s", number, example)
    if settings.graphiql:
        logger.info("Visit the URLs above to use GraphiQL")
    logger.info("=" * 50)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level, colored=get_settings().log_colors)
    print_banner(args.host, args.port)
    uvicorn.run(
        "catalog_service.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
