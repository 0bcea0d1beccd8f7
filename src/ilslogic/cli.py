#!/usr/bin/env python3
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from .config import Config, LogicConfig
from .crypt import HMAC
from .currency import DecimalCurrencyFormatter
from .exceptions import ConfigError, FixtureError
from .fixture_catalog import FixtureCatalog, StaticAuthenticator
from .logic import (
    Holds,
    TitleHolds,
    get_fine_summary,
    get_request_summary,
    get_transaction_summary,
)
from .routing import RecordRouter
from .utils.output import (
    format_holdings_lines,
    format_summary_lines,
    format_title_hold_lines,
    print_empty,
    print_error,
    print_heading,
)

# Load environment variables from .env file
load_dotenv()


def _load_catalog(ctx: click.Context, fixture: Path) -> FixtureCatalog:
    try:
        return FixtureCatalog.from_file(fixture, ctx.obj["LOGIC_CONFIG"])
    except FixtureError as e:
        print_error(str(e))
        ctx.exit(1)


def _hmac(ctx: click.Context) -> HMAC:
    try:
        return HMAC(ctx.obj["LOGIC_CONFIG"].hmac_key)
    except ConfigError as e:
        print_error(f"{e} (set Security.HMACkey or ILSLOGIC_HMAC_KEY)")
        ctx.exit(1)


def _authenticator(catalog: FixtureCatalog, patron: Optional[str]) -> StaticAuthenticator:
    if patron:
        return StaticAuthenticator(catalog.get_patron(patron))
    return StaticAuthenticator(catalog.get_default_patron())


fixture_option = click.option(
    "--fixture",
    type=click.Path(path_type=Path),
    required=True,
    help="YAML fixture file serving as the catalog.",
)
patron_option = click.option(
    "--patron", help="Patron to log in as (defaults to the fixture's patron)."
)


@click.group()
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding config.yaml (can also be set via ILSLOGIC_CONFIG_DIR).",
)
@click.option("--mode", help="Override the item level holds mode.")
@click.option("--title-mode", help="Override the title level holds mode.")
@click.option("--base-url", default="", help="Base URL for generated request links.")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity: -v for INFO, -vv for DEBUG.",
)
@click.pass_context
def cli(
    ctx,
    config_dir: Optional[Path],
    mode: Optional[str],
    title_mode: Optional[str],
    base_url: str,
    verbose: int,
):
    """Inspect holdings, hold links and account summaries against a fixture catalog."""
    log_level = logging.WARNING
    if verbose == 1:
        log_level = logging.INFO
    elif verbose >= 2:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )

    ctx.ensure_object(dict)
    logic_config = LogicConfig.from_config(Config(config_dir))
    if mode:
        logic_config = replace(logic_config, holds_mode=mode)
    if title_mode:
        logic_config = replace(logic_config, title_level_holds_mode=title_mode)
    ctx.obj["LOGIC_CONFIG"] = logic_config
    ctx.obj["ROUTER"] = RecordRouter(base_url)


@cli.command()
@click.argument("bib_id")
@fixture_option
@patron_option
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def holdings(ctx, bib_id: str, fixture: Path, patron: Optional[str], as_json: bool):
    """Show the grouped holdings of a record with their request links."""
    catalog = _load_catalog(ctx, fixture)
    logic = Holds(
        _authenticator(catalog, patron),
        catalog,
        _hmac(ctx),
        ctx.obj["LOGIC_CONFIG"],
        ctx.obj["ROUTER"],
    )
    result = logic.get_holdings(bib_id)

    if as_json:
        click.echo(json.dumps(dict(result), indent=2, default=str))
        return

    print_heading(f"Holdings for {bib_id}")
    if not result.holdings:
        print_empty("holdings")
        return
    for line in format_holdings_lines(result):
        click.echo(line)


@cli.command("title-hold")
@click.argument("bib_id")
@fixture_option
@patron_option
@click.pass_context
def title_hold(ctx, bib_id: str, fixture: Path, patron: Optional[str]):
    """Show the title level hold link of a record, or why there is none."""
    catalog = _load_catalog(ctx, fixture)
    logic = TitleHolds(
        _authenticator(catalog, patron),
        catalog,
        _hmac(ctx),
        ctx.obj["LOGIC_CONFIG"],
        ctx.obj["ROUTER"],
    )
    for line in format_title_hold_lines(logic.get_hold(bib_id)):
        click.echo(line)


@cli.command()
@click.argument("patron")
@fixture_option
@click.pass_context
def summary(ctx, patron: str, fixture: Path):
    """Summarize a patron's fines, requests and checkouts."""
    catalog = _load_catalog(ctx, fixture)
    account = catalog.get_patron(patron)
    if account is None:
        print_error(f"Unknown patron: {patron}")
        ctx.exit(1)

    formatter = DecimalCurrencyFormatter(ctx.obj["LOGIC_CONFIG"].currency)
    print_heading(f"Account summary for {patron}")
    lines = format_summary_lines(
        get_fine_summary(account.get("fines", []), formatter),
        get_request_summary(account.get("holds", [])),
        get_transaction_summary(account.get("transactions", [])),
    )
    for line in lines:
        click.echo(line)


if __name__ == "__main__":
    cli()
