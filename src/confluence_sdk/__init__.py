import json
import logging
import os
import sys

import click
from dotenv import load_dotenv

from confluence_sdk.exceptions import ConfluenceSdkError, InvalidArgumentError
from confluence_sdk.query import Clause, ContentType, and_, where
from confluence_sdk.query.values import RELATIVE_OFFSET_PATTERN
from confluence_sdk.utils.date import parse_date
from confluence_sdk.utils.logging import setup_logging

__version__ = "0.4.0"

# Initialize logging with appropriate level
logging_level = logging.WARNING
if os.getenv("CONFLUENCE_SDK_VERBOSE", "").lower() in ("true", "1", "yes"):
    logging_level = logging.DEBUG

logger = setup_logging(logging_level)

CURRENT_USER_ALIASES = ("me", "current", "currentUser()")


def _date_clause(builder, value: str) -> Clause:
    """``-4w`` style offsets are relative to now, anything else is parsed as a date."""
    if RELATIVE_OFFSET_PATTERN.match(value):
        return builder.after_now(value)
    try:
        parsed = parse_date(value)
    except (ValueError, OverflowError) as e:
        raise InvalidArgumentError(f"Cannot parse date '{value}': {e}") from e
    # Midnight means the user gave a plain date
    if parsed.hour == 0 and parsed.minute == 0:
        return builder.after(parsed.date())
    return builder.after(parsed)


def build_query(
    spaces: tuple[str, ...] = (),
    content_type: str | None = None,
    labels: tuple[str, ...] = (),
    title: str | None = None,
    text: str | None = None,
    creator: str | None = None,
    created_after: str | None = None,
    modified_after: str | None = None,
) -> Clause:
    """
    Build a CQL clause from command line style filters.

    All given filters are combined with ``and``.

    Raises:
        InvalidArgumentError: If no filter is given
    """
    clauses: list[Clause] = []
    if len(spaces) == 1:
        clauses.append(where.space.is_(spaces[0]))
    elif spaces:
        clauses.append(where.space.in_(spaces))
    if content_type:
        clauses.append(where.type.is_(ContentType(content_type)))
    if len(labels) == 1:
        clauses.append(where.label.is_(labels[0]))
    elif labels:
        clauses.append(where.label.in_(labels))
    if title:
        clauses.append(where.title.contains(title))
    if text:
        clauses.append(where.text.contains(text))
    if creator:
        if creator in CURRENT_USER_ALIASES:
            clauses.append(where.creator.is_current_user())
        else:
            clauses.append(where.creator.is_user(creator))
    if created_after:
        clauses.append(_date_clause(where.created, created_after))
    if modified_after:
        clauses.append(_date_clause(where.last_modified, modified_after))

    if not clauses:
        raise InvalidArgumentError("At least one search filter is required")
    if len(clauses) == 1:
        return clauses[0]
    return and_(*clauses)


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option("--space", "spaces", multiple=True, help="Space key (repeatable)")
@click.option(
    "--type",
    "content_type",
    type=click.Choice([t.value for t in ContentType]),
    help="Content type",
)
@click.option("--label", "labels", multiple=True, help="Label (repeatable)")
@click.option("--title", help="Text the title must contain")
@click.option("--text", help="Free text search")
@click.option("--creator", help="Creator username, or 'me' for the current user")
@click.option(
    "--created-after", help="Date (2024-01-31) or relative offset (-4w)"
)
@click.option(
    "--modified-after", help="Date (2024-01-31) or relative offset (-4w)"
)
@click.option("--limit", default=25, show_default=True, help="Results per page")
@click.option(
    "--execute/--print-only",
    default=False,
    help="Run the query against CONFLUENCE_URL instead of only printing it",
)
def main(
    verbose: int,
    env_file: str | None,
    spaces: tuple[str, ...],
    content_type: str | None,
    labels: tuple[str, ...],
    title: str | None,
    text: str | None,
    creator: str | None,
    created_after: str | None,
    modified_after: str | None,
    limit: int,
    execute: bool,
) -> None:
    """Build a Confluence CQL query and optionally run it.

    Without --execute the query is printed and nothing is sent to Confluence.
    """
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        current_logging_level = logging_level

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    try:
        query = build_query(
            spaces=spaces,
            content_type=content_type,
            labels=labels,
            title=title,
            text=text,
            creator=creator,
            created_after=created_after,
            modified_after=modified_after,
        )
    except InvalidArgumentError as e:
        raise click.UsageError(str(e)) from e

    if not execute:
        click.echo(str(query))
        return

    from confluence_sdk.confluence import ConfluenceFetcher

    try:
        fetcher = ConfluenceFetcher()
        result = fetcher.search(query, limit=limit)
    except (ConfluenceSdkError, ValueError) as e:
        logger.error(f"Search failed: {e}")
        sys.exit(1)

    click.echo(json.dumps(result.to_simplified_dict(), indent=2))


__all__ = ["main", "build_query", "__version__"]

if __name__ == "__main__":
    main()
