from __future__ import annotations

import logging
import os
from dataclasses import replace
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from result import Err

from jheap.config.defaults import default_config
from jheap.config.loader import load_config, sample_config_json
from jheap.models.errors import ChecksumMismatch
from jheap.services.checksum import verify_sha256
from jheap.services.installer import render_response_file
from jheap.services.options import try_build_heap_options, with_release_opts

console = Console()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def run(
    memory_limit: Annotated[
        str | None,
        typer.Option("--memory-limit", "-m", help="Memory limit such as 512m or 2G. Defaults to $MEMORY_LIMIT."),
    ] = None,
    ratio: Annotated[float | None, typer.Option("--ratio", "-r", help="Fraction of memory given to the heap.")] = None,
    java_opts: Annotated[
        bool, typer.Option("--java-opts", "-a", help="Print every JRE option, not only the heap size.")
    ] = False,
    join: Annotated[bool, typer.Option("--join", "-j", help="Print options on one line.")] = False,
    config_path: Annotated[str | None, typer.Option("--config", "-c", help="Path to config JSON.")] = None,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
    verify: Annotated[str | None, typer.Option("--verify", help="Installer artifact to check.")] = None,
    sha256: Annotated[str | None, typer.Option("--sha256", help="Expected sha256 of --verify.")] = None,
    response_file: Annotated[
        str | None, typer.Option("--response-file", help="Print the silent install response file for a directory.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each computation step.")] = False,
) -> None:
    _configure_logging(verbose)

    if sample_config:
        console.print(sample_config_json())
        raise typer.Exit(0)

    if response_file is not None:
        console.print(escape(render_response_file(response_file)), end="", highlight=False, soft_wrap=True)
        raise typer.Exit(0)

    if verify is not None:
        if sha256 is None:
            console.print("[red]--verify requires --sha256.[/]")
            raise typer.Exit(1)
        try:
            verify_sha256(verify, sha256)
        except (ChecksumMismatch, OSError) as exc:
            console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1) from exc
        console.print(f"[green]sha256 verified for {escape(verify)}[/]")
        raise typer.Exit(0)

    config_result = load_config(config_path)
    if isinstance(config_result, Err):
        console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()

    if ratio is not None:
        config = replace(config, heap_ratio=ratio)

    if memory_limit is None:
        memory_limit = os.environ.get(config.memory_limit_env)

    heap_result = try_build_heap_options(memory_limit, config.heap_ratio)
    if isinstance(heap_result, Err):
        console.print(f"[red]{escape(str(heap_result.unwrap_err()))}[/]")
        raise typer.Exit(1)
    opts = heap_result.unwrap()

    if java_opts:
        opts = with_release_opts(opts)

    if join:
        console.print(escape(" ".join(opts)), highlight=False, soft_wrap=True)
    else:
        for opt in opts:
            console.print(escape(opt), highlight=False, soft_wrap=True)


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
