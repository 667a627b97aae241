import json
import os
from collections.abc import Callable
from typing import Any

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

# Set up the contextual logger before the connector modules create theirs
from .logging_config import log_operation, setup_logger

logger = setup_logger()

from .exceptions import FogBugzError  # noqa: E402
from .fogbugz import FogBugzConfig, FogBugzFetcher  # noqa: E402


def _get_fetcher(ctx: click.Context) -> FogBugzFetcher:
    """Create the connector from the environment prepared by `main`."""
    if "fetcher" not in ctx.obj:
        try:
            config = FogBugzConfig.from_env()
        except ValueError as e:
            raise click.UsageError(str(e)) from e
        fetcher = FogBugzFetcher(config=config)
        ctx.call_on_close(fetcher.close)
        ctx.obj["fetcher"] = fetcher
    return ctx.obj["fetcher"]


def _run(ctx: click.Context, action: Callable[[FogBugzFetcher], Any]) -> None:
    """Run a connector call and print its result as JSON."""
    fetcher = _get_fetcher(ctx)
    try:
        result = action(fetcher)
    except FogBugzError as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(result, indent=2, ensure_ascii=False))


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=None,
    help="Enable/disable file logging",
)
@click.option(
    "--fogbugz-url",
    help="FogBugz API URL (e.g., http://fogbugz/api.xml)",
)
@click.option("--fogbugz-email", help="E-mail address of the FogBugz account")
@click.option("--fogbugz-password", help="Password of the FogBugz account")
@click.option("--category", help="FogBugz project id to filter releases and issues by")
@click.option(
    "--ssl-verify/--no-ssl-verify",
    default=None,
    help="Verify SSL certificates (default: verify)",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: int,
    env_file: str | None,
    log_to_file: bool | None,
    fogbugz_url: str | None,
    fogbugz_email: str | None,
    fogbugz_password: str | None,
    category: str | None,
    ssl_verify: bool | None,
) -> None:
    """FogBugz connector - release management operations against FogBugz 7+."""
    logging_level = "WARNING"
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(level=logging_level, log_to_file=log_to_file)

    with log_operation(logger, "configuration"):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments take precedence over the environment
        if fogbugz_url:
            os.environ["FOGBUGZ_URL"] = fogbugz_url
        if fogbugz_email:
            os.environ["FOGBUGZ_EMAIL"] = fogbugz_email
        if fogbugz_password is not None:
            os.environ["FOGBUGZ_PASSWORD"] = fogbugz_password
        if category:
            os.environ["FOGBUGZ_CATEGORY_FILTER"] = category
        if ssl_verify is not None:
            os.environ["FOGBUGZ_SSL_VERIFY"] = str(ssl_verify).lower()

    ctx.ensure_object(dict)


@main.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Check that FogBugz is reachable and the credentials work."""

    def action(fetcher: FogBugzFetcher) -> dict[str, Any]:
        fetcher.validate_connection()
        return {"success": True, "api_url": fetcher.api_url}

    _run(ctx, action)


@main.command()
@click.pass_context
def categories(ctx: click.Context) -> None:
    """List FogBugz projects."""
    _run(
        ctx,
        lambda fetcher: [c.to_simplified_dict() for c in fetcher.get_categories()],
    )


@main.command()
@click.argument("release")
@click.pass_context
def issues(ctx: click.Context, release: str) -> None:
    """List the cases of a release."""
    _run(
        ctx,
        lambda fetcher: [i.to_simplified_dict() for i in fetcher.get_issues(release)],
    )


@main.command("create-release")
@click.argument("release")
@click.pass_context
def create_release(ctx: click.Context, release: str) -> None:
    """Create an assignable milestone in the configured project."""

    def action(fetcher: FogBugzFetcher) -> dict[str, Any]:
        fetcher.create_release_number(release)
        return {"success": True, "release": release}

    _run(ctx, action)


@main.command("close-release")
@click.argument("release")
@click.pass_context
def close_release(ctx: click.Context, release: str) -> None:
    """Make a milestone of the configured project unassignable."""

    def action(fetcher: FogBugzFetcher) -> dict[str, Any]:
        fetcher.close_release_number(release)
        return {"success": True, "release": release}

    _run(ctx, action)


@main.command("close-issue")
@click.argument("issue_id")
@click.pass_context
def close_issue(ctx: click.Context, issue_id: str) -> None:
    """Close a case."""

    def action(fetcher: FogBugzFetcher) -> dict[str, Any]:
        fetcher.close_issue(issue_id)
        return {"success": True, "id": issue_id}

    _run(ctx, action)


@main.command("change-status")
@click.argument("issue_id")
@click.argument("status")
@click.pass_context
def change_status(ctx: click.Context, issue_id: str, status: str) -> None:
    """Resolve a case with the given status."""

    def action(fetcher: FogBugzFetcher) -> dict[str, Any]:
        fetcher.change_issue_status(issue_id, status)
        return {"success": True, "id": issue_id, "status": status}

    _run(ctx, action)


@main.command("change-release-status")
@click.argument("release")
@click.argument("from_status")
@click.argument("to_status")
@click.pass_context
def change_release_status(
    ctx: click.Context, release: str, from_status: str, to_status: str
) -> None:
    """Move every case of a release from one status to another."""

    def action(fetcher: FogBugzFetcher) -> dict[str, Any]:
        changed = fetcher.change_status_for_all_issues_in_release(
            release, from_status, to_status
        )
        return {"success": True, "changed": changed}

    _run(ctx, action)


@main.command()
@click.argument("issue_id")
@click.argument("text")
@click.pass_context
def comment(ctx: click.Context, issue_id: str, text: str) -> None:
    """Add text to a case as a new event."""

    def action(fetcher: FogBugzFetcher) -> dict[str, Any]:
        fetcher.append_issue_description(issue_id, text)
        return {"success": True, "id": issue_id}

    _run(ctx, action)


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
