"""CLI entry point for pinata_sdk."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from datetime import datetime

import click

from pinata_sdk.client import PinataClient
from pinata_sdk.config import load_config
from pinata_sdk.errors import PinataError
from pinata_sdk.models.config import ClientConfig
from pinata_sdk.models.groups import ListGroupsOptions
from pinata_sdk.models.pinning import (
    ListFilesOptions,
    PinataMetadata,
    PinByCidOptions,
    PinOptions,
)


def _require_credentials(cfg: ClientConfig) -> None:
    """Exit with error if neither a JWT nor a key/secret pair is configured."""
    if not cfg.has_credentials():
        click.echo("Error: No Pinata credentials configured.", err=True)
        click.echo("Set PINATA_JWT (or PINATA_API_KEY and PINATA_API_SECRET).", err=True)
        sys.exit(1)


def _run(cfg: ClientConfig, op) -> None:
    """Run ``op(client)`` on a fresh client, reporting library errors on stderr."""

    async def _main():
        async with PinataClient.from_config(cfg) as client:
            return await op(client)

    try:
        asyncio.run(_main())
    except PinataError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _echo_json(value) -> None:
    click.echo(json.dumps(value, indent=2, default=str))


def _parse_keyvalues(ctx, param, values: tuple[str, ...]) -> dict[str, str]:
    """Click callback turning repeated ``key=value`` options into a dict."""
    parsed: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}", ctx=ctx, param=param)
        parsed[key] = value
    return parsed


def _log_level(cfg: ClientConfig, verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    level = getattr(logging, cfg.log_level.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _pin_options(name: str | None, keyvalues: dict[str, str]) -> PinOptions | None:
    if not name and not keyvalues:
        return None
    return PinOptions(metadata=PinataMetadata(name=name or "", keyvalues=keyvalues))


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """pinata - pin and manage content on Pinata from the command line."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["config"] = cfg
    ctx.obj["verbose"] = verbose

    logging.basicConfig(
        level=_log_level(cfg, verbose),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show client configuration."""
    cfg = ctx.obj["config"]
    click.echo(f"Base URL:   {cfg.base_url}")
    click.echo(f"Timeout:    {cfg.timeout}s")
    click.echo(f"Workers:    {cfg.max_workers}")
    if cfg.jwt:
        click.echo("Auth:       JWT ***configured***")
    elif cfg.api_key:
        click.echo("Auth:       API key ***configured***")
    else:
        click.echo("Auth:       (not set)")


@cli.command()
@click.pass_context
def auth(ctx: click.Context) -> None:
    """Test the configured credentials."""
    cfg = ctx.obj["config"]
    _require_credentials(cfg)

    async def _auth(client: PinataClient):
        resp = await client.test_authentication()
        click.echo(resp.message)

    _run(cfg, _auth)


# ── Pinning ────────────────────────────────────────────


@cli.command("pin-file")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--name", default=None, help="Pin name (single file only)")
@click.option("--kv", "keyvalues", multiple=True, callback=_parse_keyvalues,
              help="Metadata key=value (repeatable)")
@click.pass_context
def pin_file(ctx: click.Context, paths: tuple[str, ...], name: str | None,
             keyvalues: dict[str, str]) -> None:
    """Upload and pin one or more local files."""
    if name and len(paths) > 1:
        raise click.UsageError("--name applies to a single file only", ctx=ctx)
    cfg = ctx.obj["config"]
    _require_credentials(cfg)
    options = _pin_options(name, keyvalues)

    async def _pin(client: PinataClient):
        if len(paths) == 1:
            results = [await client.pinning.pin_file(paths[0], options)]
        else:
            results = await client.pinning.pin_files(list(paths), [options] * len(paths))
        for path, r in zip(paths, results):
            dup = " (duplicate)" if r.is_duplicate else ""
            click.echo(f"{r.ipfs_hash}  {r.pin_size:>10}  {path}{dup}")

    _run(cfg, _pin)


@cli.command("pin-json")
@click.argument("source", type=click.File("r"))
@click.option("--name", default=None, help="Pin name")
@click.pass_context
def pin_json(ctx: click.Context, source, name: str | None) -> None:
    """Pin a JSON document read from SOURCE (use - for stdin)."""
    cfg = ctx.obj["config"]
    _require_credentials(cfg)
    try:
        data = json.load(source)
    except json.JSONDecodeError as exc:
        click.echo(f"Error: invalid JSON: {exc}", err=True)
        sys.exit(1)

    async def _pin(client: PinataClient):
        r = await client.pinning.pin_json(data, _pin_options(name, {}))
        click.echo(r.ipfs_hash)

    _run(cfg, _pin)


@cli.command("pin-cid")
@click.argument("cid")
@click.option("--name", default=None, help="Pin name")
@click.option("--group", "group_id", default="", help="Group to add the pin to")
@click.pass_context
def pin_cid(ctx: click.Context, cid: str, name: str | None, group_id: str) -> None:
    """Queue a pin-by-CID job."""
    cfg = ctx.obj["config"]
    _require_credentials(cfg)
    options = PinByCidOptions(metadata=PinataMetadata(name=name or ""))
    options.options.group_id = group_id

    async def _pin(client: PinataClient):
        r = await client.pinning.pin_by_cid(cid, options)
        click.echo(f"{r.id}  {r.status}  {r.ipfs_hash}")

    _run(cfg, _pin)


@cli.command("list")
@click.option("--cid", default="", help="Filter by CID")
@click.option("--status", default="pinned", help="pinned, unpinned or all")
@click.option("--limit", type=int, default=10, help="Page size")
@click.option("--offset", type=int, default=0, help="Page offset")
@click.option("--since", type=click.DateTime(), default=None, help="Pinned on/after this date")
@click.pass_context
def list_pins(ctx: click.Context, cid: str, status: str, limit: int, offset: int,
              since: datetime | None) -> None:
    """List pinned content."""
    cfg = ctx.obj["config"]
    _require_credentials(cfg)
    options = ListFilesOptions(
        cid=cid, status=status, page_limit=limit, page_offset=offset,
        pin_start=since, include_count=True,
    )

    async def _list(client: PinataClient):
        resp = await client.pinning.list_files(options)
        click.echo(f"{resp.count} pins")
        for pin in resp.rows:
            name = pin.metadata.get("name") or ""
            click.echo(f"  {pin.ipfs_pin_hash}  {pin.size:>10}  {pin.date_pinned}  {name}")

    _run(cfg, _list)


@cli.command()
@click.argument("cids", nargs=-1, required=True)
@click.pass_context
def unpin(ctx: click.Context, cids: tuple[str, ...]) -> None:
    """Unpin one or more CIDs."""
    cfg = ctx.obj["config"]
    _require_credentials(cfg)

    async def _unpin(client: PinataClient):
        errors = await client.pinning.delete_files(list(cids))
        for err in errors:
            click.echo(str(err), err=True)
        click.echo(f"Unpinned {len(cids) - len(errors)}/{len(cids)}")
        if errors:
            sys.exit(1)

    _run(cfg, _unpin)


# ── Groups ─────────────────────────────────────────────


@cli.command()
@click.option("--name", "name_contains", default="", help="Only groups whose name contains this")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
@click.pass_context
def groups(ctx: click.Context, name_contains: str, as_json: bool) -> None:
    """List groups."""
    cfg = ctx.obj["config"]
    _require_credentials(cfg)

    async def _groups(client: PinataClient):
        found = await client.groups.list(ListGroupsOptions(name_contains=name_contains))
        if as_json:
            _echo_json([g.__dict__ for g in found])
            return
        if not found:
            click.echo("No groups.")
        for g in found:
            click.echo(f"  {g.id}  {g.name}  (created {g.created_at})")

    _run(cfg, _groups)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
