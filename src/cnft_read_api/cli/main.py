"""CLI for querying compressed NFTs through the read API."""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

import typer
from dotenv import load_dotenv
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.traceback import install

from cnft_read_api.config import ReadApiSettings
from cnft_read_api.core import (
    AssetSortBy,
    AssetSortField,
    ReadApiAsset,
    ReadApiAssetList,
    SortDirection,
    find_leaf_asset_address,
    to_edition_view,
    to_metadata_view,
    to_mint_view,
)
from cnft_read_api.errors import ReadApiError
from cnft_read_api.rpc import ReadApiClient, ReadApiInterface, RetryConfig, RetryingReadApiClient
from cnft_read_api.storage import load_keypair, load_or_generate_keypair, load_public_keys, save_public_key
from cnft_read_api.utils import explorer_url

app = typer.Typer(
    name="cnft-read-api",
    help="Look up compressed NFTs, proofs and collections through the read API",
    add_completion=False,
)

console = Console()


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


class AssetView(StrEnum):
    """Domain views an asset can be transformed into."""

    EDITION = "edition"
    MINT = "mint"
    METADATA = "metadata"


VIEW_TRANSFORMERS = {
    AssetView.EDITION: to_edition_view,
    AssetView.MINT: to_mint_view,
    AssetView.METADATA: to_metadata_view,
}


@dataclass
class CliState:
    """Options shared by every command."""

    settings: ReadApiSettings
    retries: int = 0
    debug: bool = False


FORMAT_OPTION = typer.Option(OutputFormat.TABLE, "--format", "-f", help="Output format")


def _create_client(settings: ReadApiSettings) -> ReadApiClient:
    return settings.create_client()


@contextmanager
def _read_api(state: CliState) -> Iterator[ReadApiInterface]:
    """Open a client for one command, wrapped in the retry layer when requested."""
    client = _create_client(state.settings)
    try:
        if state.retries > 0:
            yield RetryingReadApiClient(client, RetryConfig(max_retries=state.retries))
        else:
            yield client
    finally:
        client.close()


def _fail(state: CliState, error: Exception) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {error}")
    if state.debug and isinstance(error, ReadApiError) and error.cause is not None:
        console.print(f"[dim]Caused by: {error.cause!r}[/dim]")
    return typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    rpc_url: str | None = typer.Option(None, "--rpc-url", "-u", help="Read API endpoint (overrides RPC_URL)"),
    cluster: str | None = typer.Option(None, "--cluster", "-c", help="Cluster name (overrides SOLANA_CLUSTER)"),
    retries: int = typer.Option(0, "--retries", "-r", min=0, help="Retry transport failures this many times"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output"),
) -> None:
    """Resolve settings from the environment, a .env file, and the global options."""
    load_dotenv()

    if debug:
        install(show_locals=True)
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console)],
        )

    try:
        settings = ReadApiSettings.from_env(rpc_url=rpc_url, cluster=cluster)
    except KeyError as e:
        console.print(f"[bold red]Unknown cluster:[/bold red] {e}")
        raise typer.Exit(code=1)

    if debug:
        console.print(f"[dim]Using read API endpoint {settings.rpc_url}[/dim]")

    ctx.obj = CliState(settings=settings, retries=retries, debug=debug)


@app.command()
def asset(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Asset id"),
    format: OutputFormat = FORMAT_OPTION,
) -> None:
    """Fetch a compressed asset."""
    state: CliState = ctx.obj
    try:
        with _read_api(state) as read_api:
            result = read_api.get_asset(address)
    except ReadApiError as e:
        raise _fail(state, e)

    if format == OutputFormat.JSON:
        _output_json(result)
    else:
        _output_asset_table(result, state.settings.cluster)


@app.command()
def proof(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Asset id"),
    format: OutputFormat = FORMAT_OPTION,
) -> None:
    """Fetch the Merkle proof of a compressed asset."""
    state: CliState = ctx.obj
    try:
        with _read_api(state) as read_api:
            result = read_api.get_asset_proof(address)
    except ReadApiError as e:
        raise _fail(state, e)

    if format == OutputFormat.JSON:
        _output_json(result)
    else:
        _output_mapping_table(f"Proof for {address}", result)


@app.command("by-owner")
def by_owner(
    ctx: typer.Context,
    owner: str = typer.Argument(..., help="Owner wallet address"),
    page: int | None = typer.Option(None, "--page", "-p", help="Page number (1-based)"),
    before: str | None = typer.Option(None, "--before", help="Return assets before this cursor"),
    after: str | None = typer.Option(None, "--after", help="Return assets after this cursor"),
    limit: int | None = typer.Option(None, "--limit", "-l", help="Assets per page"),
    sort_by: AssetSortField | None = typer.Option(None, "--sort-by", help="Sort key"),
    sort_direction: SortDirection = typer.Option(SortDirection.DESC, "--sort-direction", help="Sort direction"),
    format: OutputFormat = FORMAT_OPTION,
) -> None:
    """List compressed assets held by an owner."""
    state: CliState = ctx.obj
    sort = AssetSortBy(sort_by=sort_by, sort_direction=sort_direction) if sort_by else None
    try:
        with _read_api(state) as read_api:
            result = read_api.get_assets_by_owner(
                owner, page=page, before=before, after=after, limit=limit, sort_by=sort
            )
    except ReadApiError as e:
        raise _fail(state, e)

    if format == OutputFormat.JSON:
        _output_json(result)
    else:
        _output_asset_list_table(f"Assets owned by {owner}", result)


@app.command("by-group")
def by_group(
    ctx: typer.Context,
    group_key: str = typer.Argument(..., help="Group key, e.g. 'collection'"),
    group_value: str = typer.Argument(..., help="Group value, e.g. the collection mint"),
    page: int | None = typer.Option(None, "--page", "-p", help="Page number (1-based)"),
    before: str | None = typer.Option(None, "--before", help="Return assets before this cursor"),
    after: str | None = typer.Option(None, "--after", help="Return assets after this cursor"),
    limit: int | None = typer.Option(None, "--limit", "-l", help="Assets per page"),
    sort_by: AssetSortField | None = typer.Option(None, "--sort-by", help="Sort key"),
    sort_direction: SortDirection = typer.Option(SortDirection.DESC, "--sort-direction", help="Sort direction"),
    format: OutputFormat = FORMAT_OPTION,
) -> None:
    """List compressed assets in a group (e.g., a collection)."""
    state: CliState = ctx.obj
    sort = AssetSortBy(sort_by=sort_by, sort_direction=sort_direction) if sort_by else None
    try:
        with _read_api(state) as read_api:
            result = read_api.get_assets_by_group(
                group_key, group_value, page=page, before=before, after=after, limit=limit, sort_by=sort
            )
    except ReadApiError as e:
        raise _fail(state, e)

    if format == OutputFormat.JSON:
        _output_json(result)
    else:
        _output_asset_list_table(f"Assets in {group_key} {group_value}", result)


@app.command()
def view(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Asset id"),
    as_view: AssetView = typer.Option(AssetView.METADATA, "--as", "-a", help="View to build from the asset"),
    format: OutputFormat = FORMAT_OPTION,
) -> None:
    """
    Fetch an asset and show it as an edition, mint or metadata record.

    Examples:

        # Metadata view, as consumed by token-metadata tooling
        cnft-read-api view <ASSET_ID>

        # Mint view as JSON
        cnft-read-api view <ASSET_ID> --as mint --format json
    """
    state: CliState = ctx.obj
    try:
        with _read_api(state) as read_api:
            result = VIEW_TRANSFORMERS[as_view](read_api.get_asset(address))
    except ReadApiError as e:
        raise _fail(state, e)

    if format == OutputFormat.JSON:
        _output_json(result)
    else:
        _output_mapping_table(
            f"{as_view.value.title()} view of {address}",
            result.model_dump(mode="json", by_alias=True),
        )


@app.command("leaf-asset-id")
def leaf_asset_id(
    ctx: typer.Context,
    tree: str = typer.Argument(..., help="Merkle tree address"),
    leaf_index: int = typer.Argument(..., min=0, help="Leaf index in the tree"),
) -> None:
    """Derive the asset id of a tree leaf without any network call."""
    state: CliState = ctx.obj
    try:
        address = find_leaf_asset_address(tree, leaf_index)
    except ReadApiError as e:
        raise _fail(state, e)

    console.print(address, markup=False, highlight=False)


@app.command()
def keys(
    ctx: typer.Context,
    path: Path | None = typer.Option(None, "--path", help="Public-key registry file"),
) -> None:
    """List the local public-key registry and the configured payer."""
    state: CliState = ctx.obj
    registry_path = path or state.settings.key_dir / "keys.json"
    entries = load_public_keys(registry_path)

    payer_path = state.settings.payer_keypair_path
    if payer_path is not None:
        try:
            entries["payer"] = load_keypair(payer_path).pubkey()
        except (OSError, ValueError, TypeError) as e:
            raise _fail(state, e)

    if not entries:
        console.print(f"\n[yellow]No public keys found in {registry_path}[/yellow]")
        return

    table = Table(title="Saved Public Keys", show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Address", style="green", no_wrap=True)
    table.add_column("Explorer", style="dim")

    for name, pubkey in entries.items():
        table.add_row(name, str(pubkey), explorer_url(address=str(pubkey), cluster=state.settings.cluster))

    console.print(table)


@app.command()
def keygen(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Keypair name, e.g. 'testWallet'"),
    path: Path | None = typer.Option(None, "--path", help="Public-key registry file"),
) -> None:
    """
    Load or create a named keypair in the key directory and register its public key.

    The keypair is stored as ``<key_dir>/<name>.json``; an existing file is reused.
    """
    state: CliState = ctx.obj
    try:
        keypair = load_or_generate_keypair(name, state.settings.key_dir)
    except (OSError, ValueError, TypeError) as e:
        raise _fail(state, e)

    save_public_key(name, keypair.pubkey(), path or state.settings.key_dir / "keys.json")
    console.print(str(keypair.pubkey()), markup=False, highlight=False)


def _collection_of(item: ReadApiAsset) -> str:
    return next((g.group_value for g in item.grouping if g.group_key == "collection"), "-")


def _output_asset_table(item: ReadApiAsset, cluster: str) -> None:
    """Output a single asset as rich table."""
    metadata = item.content.metadata or {}

    table = Table(title=f"Asset {item.id}", show_header=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Name", str(metadata.get("name", "-")))
    table.add_row("Symbol", str(metadata.get("symbol", "-")))
    table.add_row("Owner", item.ownership.owner if item.ownership else "-")
    table.add_row("Collection", _collection_of(item))
    table.add_row("Tree", item.compression.tree)
    table.add_row("Leaf", str(item.compression.leaf_id))
    table.add_row("URI", item.content.json_uri)
    table.add_row("Royalty (bps)", str(item.royalty.basis_points))
    table.add_row("Mutable", "yes" if item.mutable else "no")
    table.add_row("Explorer", explorer_url(address=item.id, cluster=cluster))

    console.print("\n")
    console.print(table)


def _output_asset_list_table(title: str, assets: ReadApiAssetList) -> None:
    """Output a page of assets as rich table."""
    if not assets.items:
        console.print("\n[yellow]No assets found[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Asset", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Collection", style="yellow")
    table.add_column("Leaf", style="white", justify="right")

    for item in assets.items:
        metadata = item.content.metadata or {}
        table.add_row(item.id, str(metadata.get("name", "-")), _collection_of(item), str(item.compression.leaf_id))

    console.print("\n")
    console.print(table)

    summary_table = Table(show_header=False, box=None)
    summary_table.add_column("Label", style="bold")
    summary_table.add_column("Value", style="bold green")
    summary_table.add_row("Total:", str(assets.total))
    summary_table.add_row("Limit:", str(assets.limit))
    if assets.page is not None:
        summary_table.add_row("Page:", str(assets.page))

    console.print(summary_table)
    console.print("\n")


def _output_mapping_table(title: str, data: dict[str, Any]) -> None:
    """Output a flat key/value view; nested values are shown as JSON."""
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in data.items():
        rendered = json.dumps(value) if isinstance(value, dict | list) else str(value)
        table.add_row(key, rendered)

    console.print("\n")
    console.print(table)


def _output_json(data: BaseModel | dict[str, Any]) -> None:
    """Output a model or mapping as JSON."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)
    console.print(json.dumps(data, indent=2), soft_wrap=True, markup=False, highlight=False)


if __name__ == "__main__":
    app()
