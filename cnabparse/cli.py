"""Click CLI for decoding CNAB240 files."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from cnabparse.config import FORMATS, Config, get_config_path, load_config, save_config, validate_config
from cnabparse.errors import ParseError
from cnabparse.log import configure_logging


class Context:
    """Holds the config file location and its lazily loaded settings."""

    def __init__(self, config_path: Path | None = None):
        self._config_path = config_path
        self._config: Config | None = None

    @property
    def config_path(self) -> Path:
        return self._config_path or get_config_path()

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config


pass_ctx = click.make_pass_decorator(Context)


@click.group()
@click.option(
    "--config", "config_path", default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config.toml (default: user app dir)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.version_option(package_name="cnabparse")
@click.pass_context
def cli(ctx, config_path: Optional[Path], verbose: bool):
    """cnabp - CNAB240 record decoder.

    Split CNAB240 bank files into 240-byte records and decode each one
    into named fields using the FEBRABAN layouts.
    """
    configure_logging(verbose)
    ctx.obj = Context(config_path=config_path)


def _kind_choice() -> click.Choice:
    from cnabparse.cnab240.parsers import RECORD_PARSERS
    return click.Choice(sorted(RECORD_PARSERS))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "fmt", type=click.Choice(FORMATS), default=None,
              help="Output format (default: from config, else text)")
@click.option("--strip/--raw", "strip", default=None,
              help="Remove field padding (default: from config, else raw)")
@click.option("--encoding", default=None, help="Text encoding of the file (default: from config, else utf-8)")
@click.option("--kind", type=_kind_choice(), default=None,
              help="Decode every record with this layout instead of detecting it")
@click.option("--output", "-o", "output_path", type=click.Path(), default=None,
              help="Write output to a file instead of stdout")
@pass_ctx
def parse(ctx: Context, path: Path, fmt: Optional[str], strip: Optional[bool],
          encoding: Optional[str], kind: Optional[str], output_path: Optional[str]):
    """Decode every record of a CNAB240 file."""
    from cnabparse.cnab240.reader import read_file

    config = ctx.config
    settings = Config(
        encoding=encoding or config.encoding,
        strip=config.strip if strip is None else strip,
        format=fmt or config.format,
    )
    validate_config(settings)

    try:
        records = read_file(path, encoding=settings.encoding, strip=settings.strip, kind=kind)
    except ParseError as e:
        raise click.ClickException(str(e))

    if settings.format == "json":
        from cnabparse.export.json_export import export_json
        data = export_json(records)
    elif settings.format == "csv":
        from cnabparse.export.csv_export import export_csv
        data = export_csv(records)
    else:
        data = _format_text(records)

    if output_path:
        Path(output_path).write_text(data, encoding="utf-8")
        click.echo(f"{len(records)} records written to {output_path}")
    else:
        click.echo(data, nl=not data.endswith("\n"))


def _format_text(records) -> str:
    lines = []
    for rec in records:
        lines.append(f"#{rec.line_no} {rec.kind}")
        for name, value in rec.fields.items():
            lines.append(f"  {name:<30} \"{value}\"")
        lines.append("")
    return "\n".join(lines)


@cli.command()
@click.argument("kind", type=_kind_choice())
def layout(kind: str):
    """Show the field table of a record layout."""
    from cnabparse.cnab240.parsers import get_parser
    from cnabparse.layout import Alignment

    parser = get_parser(kind)
    click.echo(f"{kind} ({parser.length} bytes, {len(parser.fields)} fields)\n")
    click.echo(f"{'#':>3}  {'Field':<30}  {'Pos':>9}  {'Len':>4}  {'Type':<4}  {'Pad':<3}")
    click.echo("-" * 64)
    for i, f in enumerate(parser.fields, start=1):
        first, last = f.position
        kind_str = "Num" if f.alignment is Alignment.RIGHT else "Alfa"
        click.echo(f"{i:>3}  {f.name:<30}  {first:>4}-{last:<4}  {f.length:>4}  {kind_str:<4}  '{f.pad_char}'")


@cli.command()
def kinds():
    """List the known record layouts."""
    from cnabparse.cnab240.parsers import RECORD_PARSERS

    for name, factory in RECORD_PARSERS.items():
        click.echo(f"{name:<16} {len(factory().fields):>3} fields")


@cli.command("config")
@click.option("--init", "init_", is_flag=True, help="Write a config file with default settings")
@pass_ctx
def config_cmd(ctx: Context, init_: bool):
    """Show the active settings, or write a default config file."""
    path = ctx.config_path

    if init_:
        if path.exists():
            click.confirm(f"Overwrite {path}?", abort=True)
        saved = save_config(Config(), path)
        click.echo(f"Config saved to {saved}")
        return

    config = ctx.config
    source = path if path.exists() else f"{path} (not found, using defaults)"
    click.echo(f"Config:   {source}")
    click.echo(f"encoding: {config.encoding}")
    click.echo(f"strip:    {'true' if config.strip else 'false'}")
    click.echo(f"format:   {config.format}")
