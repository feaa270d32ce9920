"""Root CLI group for validbr with global flags and the check/generate commands."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass

import click

from validbr import __version__
from validbr.cnpj import Branch, Cnpj
from validbr.core.errors import RegistryError
from validbr.core.result import Err, Ok, map_result
from validbr.cpf import Cpf
from validbr.generator import random_cnpjs, random_cpfs
from validbr.infra.logging import configure_logging, get_logger
from validbr.infra.random_source import RandomDigitSource
from validbr.serialization import to_dict

log = get_logger("cli")

_PARSERS: dict[str, Callable[[str], Ok[Cpf] | Ok[Cnpj] | Err[RegistryError]]] = {
    "cpf": Cpf.parse,
    "cnpj": Cnpj.parse,
}

_KIND = click.Choice(sorted(_PARSERS), case_sensitive=False)


@dataclass(frozen=True, slots=True)
class AppContext:
    """Global flags shared by every command."""

    json_output: bool = False


def _render(value: Cpf | Cnpj, digits_only: bool) -> str:
    return value.digits_only() if digits_only else str(value)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="validbr")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, verbose: bool, log_json: bool) -> None:
    """validbr — validate and generate CPF and CNPJ numbers."""
    configure_logging(verbose=verbose, log_json=log_json)
    ctx.obj = AppContext(json_output=json_output)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("kind", type=_KIND)
@click.argument("values", nargs=-1, required=True)
@click.option("--digits-only", is_flag=True, help="Print valid values without punctuation.")
@click.pass_obj
def check(app: AppContext, kind: str, values: tuple[str, ...], digits_only: bool) -> None:
    """Validate each VALUE as a CPF or CNPJ; exit 1 if any is invalid."""
    parse = _PARSERS[kind.lower()]
    failures = 0
    records: list[dict[str, object]] = []
    for raw in values:
        result = map_result(parse(raw), lambda v: _render(v, digits_only))
        match result:
            case Ok(rendered):
                log.debug("check.valid", kind=kind, value=rendered)
                records.append({"input": raw, "valid": True, "value": rendered})
                if not app.json_output:
                    click.echo(rendered)
            case Err(error):
                failures += 1
                log.info("check.invalid", kind=kind, code=error.code, input=raw)
                records.append({"input": raw, "valid": False, "error": error.to_dict()})
                if not app.json_output:
                    click.echo(f"{raw}: {error.code}: {error.message}", err=True)
    if app.json_output:
        click.echo(json.dumps(records, indent=2))
    if failures:
        ctx = click.get_current_context()
        ctx.exit(1)


@cli.command()
@click.argument("kind", type=_KIND)
@click.option("-n", "--count", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--seed", default=None, type=int, help="Seed for reproducible output.")
@click.option(
    "--branch", default=None, type=int,
    help="Pin the CNPJ branch number (0..9999).",
)
@click.option("--digits-only", is_flag=True, help="Print values without punctuation.")
@click.pass_obj
def generate(
    app: AppContext,
    kind: str,
    count: int,
    seed: int | None,
    branch: int | None,
    digits_only: bool,
) -> None:
    """Generate COUNT random valid CPF or CNPJ numbers."""
    source = RandomDigitSource(seed=seed)
    values: tuple[Cpf, ...] | tuple[Cnpj, ...]
    if kind.lower() == "cpf":
        if branch is not None:
            raise click.UsageError("--branch only applies to cnpj")
        values = random_cpfs(source, count)
    else:
        pinned: Branch | None = None
        if branch is not None:
            match Branch.from_number(branch):
                case Err(error):
                    raise click.BadParameter(error.message, param_hint="--branch")
                case Ok(b):
                    pinned = b
        values = random_cnpjs(source, count, pinned)
    log.debug("generate.done", kind=kind, count=count, seed=seed)
    if app.json_output:
        click.echo(json.dumps([
            {**to_dict(v), "formatted": _render(v, digits_only)} for v in values
        ], indent=2))
        return
    for v in values:
        click.echo(_render(v, digits_only))


def main() -> None:
    cli()
