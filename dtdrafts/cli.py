"""Command line interface for dtdrafts."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Sequence

import click
import typer
from loguru import logger

from . import __version__
from .articles import Article, ArticleFetchError, ArticleService, CacheError
from .config import store
from .search import (
    all_unpublished,
    search_articles,
    search_by_body,
    search_by_tag,
    search_by_title,
)

EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

MISSING_KEY_MESSAGE = "No API key found. Please set it first with: dtdrafts --set-api-key YOUR_API_KEY"

_DEFAULT_SINK_ID = 0
_stderr_sink_id: int | None = None


class SearchField(str, Enum):
    ANY = "any"
    TITLE = "title"
    BODY = "body"


_QUERY_FILTERS: dict[SearchField, Callable[[Sequence[Article], str], list[Article]]] = {
    SearchField.ANY: search_articles,
    SearchField.TITLE: search_by_title,
    SearchField.BODY: search_by_body,
}


app = typer.Typer(help="Search your dev.to draft articles", add_completion=False)


def _exit(code: int) -> None:
    raise typer.Exit(code)


def _configure_logging(verbose: bool) -> None:
    """Route loguru to the current stderr at WARNING, or DEBUG with --verbose."""

    global _stderr_sink_id
    sink_id = _DEFAULT_SINK_ID if _stderr_sink_id is None else _stderr_sink_id
    try:
        logger.remove(sink_id)
    except ValueError:
        logger.debug("Log sink {} already removed", sink_id)
    _stderr_sink_id = logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level}</level>: {message}",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dtdrafts {__version__}")
        _exit(0)


@app.command()
def run(
    query: str | None = typer.Option(None, "--query", "-q", help="Search drafts by title, body or tag"),
    field: SearchField = typer.Option(
        SearchField.ANY,
        "--in",
        case_sensitive=False,
        help="Restrict --query to one field",
    ),
    tag: str | None = typer.Option(None, "--tag", "-t", help="Show drafts carrying exactly this tag"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Show all drafts without filtering"),
    refresh: bool = typer.Option(False, "--refresh", "-r", help="Force refresh of cached articles"),
    set_api_key: str | None = typer.Option(None, "--set-api-key", help="Set the dev.to API key"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging on stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Search your dev.to draft articles."""

    _configure_logging(verbose)

    if set_api_key is not None:
        _save_api_key(set_api_key)
        return

    if not (show_all or refresh or query is not None or tag is not None):
        _print_usage()
        return

    service = ArticleService(_load_api_key())

    if refresh:
        estimate = service.estimate_refresh()
        if estimate is not None:
            typer.echo(
                f"Current cache: {estimate.cached_count} articles. "
                f"Estimated time to refresh: about {estimate.seconds} seconds ({estimate.pages} pages)."
            )

    articles = _get_articles(service, refresh)

    if show_all:
        _display_articles(all_unpublished(articles))
    elif query is not None or tag is not None:
        results: Sequence[Article] = articles
        if query is not None:
            results = _QUERY_FILTERS[field](results, query)
        if tag is not None:
            results = search_by_tag(results, tag)
        _display_articles(results)


def _save_api_key(api_key: str) -> None:
    try:
        store.save(api_key)
    except ValueError as exc:
        logger.error("Invalid API key: {}", exc)
        _exit(EXIT_CONFIG_ERROR)
    except OSError as exc:
        logger.error("Failed to save API key: {}", exc)
        _exit(EXIT_FAILURE)
    typer.secho("API key saved successfully!", fg=typer.colors.GREEN)


def _load_api_key() -> str:
    config = store.load()
    if config is None:
        logger.error(MISSING_KEY_MESSAGE)
        _exit(EXIT_CONFIG_ERROR)
    assert config is not None
    try:
        return config.resolved_api_key()
    except EnvironmentError as exc:
        logger.error("Failed to load configuration: {}", exc)
        raise typer.Exit(EXIT_CONFIG_ERROR) from exc


def _get_articles(service: ArticleService, refresh: bool) -> list[Article]:
    will_fetch = refresh or not service.cache.exists()
    if will_fetch:
        typer.secho("Fetching articles from dev.to...", fg=typer.colors.BLUE)

    try:
        articles = service.fetch(force_refresh=refresh, on_page=_report_page)
    except ArticleFetchError as exc:
        logger.error("{}", exc)
        raise typer.Exit(EXIT_FAILURE) from exc
    except CacheError as exc:
        logger.error("{} (try --refresh)", exc)
        raise typer.Exit(EXIT_FAILURE) from exc

    if will_fetch:
        typer.secho(f"Articles cached successfully! Total {len(articles)} articles.", fg=typer.colors.GREEN)
    return articles


def _report_page(page: int, total: int) -> None:
    typer.echo(f"Page {page}: Fetched {total} articles so far...")


def _display_articles(articles: Sequence[Article]) -> None:
    if not articles:
        typer.secho("No draft articles found.", fg=typer.colors.YELLOW)
        return

    typer.echo(typer.style(str(len(articles)), fg=typer.colors.GREEN, bold=True) + " draft article(s) found:\n")
    for index, article in enumerate(articles, start=1):
        typer.echo(f"{index}. " + typer.style(article.title, fg=typer.colors.CYAN, bold=True))
        typer.secho(article.edit_url, fg=typer.colors.BLUE, underline=True)
        typer.echo()


def _print_usage() -> None:
    typer.secho("Usage:", fg=typer.colors.YELLOW, bold=True)
    typer.echo("  dtdrafts -q <query>            Search draft articles")
    typer.echo("  dtdrafts -q <query> --in title Search titles only")
    typer.echo("  dtdrafts -t <tag>              Show drafts with an exact tag")
    typer.echo("  dtdrafts --all                 Show all draft articles")
    typer.echo("  dtdrafts --refresh             Refresh article cache")
    typer.echo("  dtdrafts --set-api-key <key>   Set dev.to API key")
    typer.echo()
    typer.secho("Examples:", fg=typer.colors.YELLOW, bold=True)
    typer.echo("  dtdrafts -q aws")
    typer.echo("  dtdrafts -q rust")
    typer.echo("  dtdrafts --all")


def main(argv: list[str] | None = None) -> int:
    """Entry point compatible with setuptools console scripts."""

    try:
        result = app(args=argv, standalone_mode=False)
    except typer.Exit as exc:  # pragma: no cover - Typer translates exit codes
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    if isinstance(result, int):
        return result
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
