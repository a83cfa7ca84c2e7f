#!/usr/bin/env python3
"""
dumpsplit – cut SQL dump files into executable statements.

• ``strip``  blanks ``#`` remark lines (line numbers stay aligned)
• ``split``  prints the statements, or writes one file per statement
• ``stats``  counts statements per dump and what kind they are

Delimiter, remark marker, encoding and strictness come from a profile in
``dumpsplit.config.yml`` (or a TOML file given with ``-c``); without one the
MySQL defaults apply.
"""
from __future__ import annotations

import pathlib
import sys

import click

from dumpsplit import __version__
from dumpsplit.config import ConfigError, Profile, load
from dumpsplit.logging_setup import setup_logging
from dumpsplit.reader import DumpFile, discover
from dumpsplit.remarks import strip
from dumpsplit.summary import tally


def _profile(ctx: click.Context) -> Profile:
    return ctx.obj["profile"]


def _fail_unterminated(name: str, tail: str) -> None:
    click.echo(
        f"{name}: script ends inside an open literal ({len(tail)} chars dropped)",
        err=True,
    )
    sys.exit(1)


def _decode_failed(path, encoding: str, exc: UnicodeDecodeError) -> None:
    click.echo(f"Cannot decode {path} as {encoding}: {exc.reason} at byte {exc.start}", err=True)
    sys.exit(1)


def _read_dump(path: str, profile: Profile) -> DumpFile:
    try:
        return DumpFile(pathlib.Path(path), profile.encoding)
    except UnicodeDecodeError as exc:
        _decode_failed(path, profile.encoding, exc)


def _validate_delimiter(_ctx, _param, value):
    if value is not None and len(value) != 1:
        raise click.BadParameter("delimiter must be a single character")
    return value


def _common_opts(fn):
    opts = [
        click.option(
            "--strict", is_flag=True,
            help="fail when a dump ends inside an open literal",
        ),
    ]
    for opt in reversed(opts):
        fn = opt(fn)
    return fn


@click.group()
@click.option(
    "-c", "--config", "config_path", type=click.Path(), help="profile config (YAML or TOML)"
)
@click.option("-p", "--profile", "profile_name", help="profile to use from the config")
@click.option("-v", "--verbose", is_flag=True, help="debug logging")
@click.pass_context
def main(ctx, config_path, profile_name, verbose):
    setup_logging("DEBUG" if verbose else "WARNING")
    try:
        profile = load(config_path, profile_name)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
    ctx.obj = {"profile": profile}


@main.command()
def version():
    click.echo(__version__)


@main.command("strip")
@click.argument("dump", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="write here instead of stdout")
@click.pass_context
def strip_cmd(ctx, dump, output):
    profile = _profile(ctx)
    cleaned = strip(_read_dump(dump, profile).sql, profile.remark_marker)
    if output:
        pathlib.Path(output).write_text(cleaned, encoding=profile.encoding)
        click.echo(f"Wrote {output}")
    else:
        click.echo(cleaned, nl=False)


@main.command("split")
@click.argument("dump", type=click.Path(exists=True, dir_okay=False))
@click.option("-d", "--delimiter", callback=_validate_delimiter, help="override the profile delimiter")
@click.option(
    "-o", "--output-dir", type=click.Path(file_okay=False),
    help="write NNNN.sql per statement into this directory",
)
@_common_opts
@click.pass_context
def split_cmd(ctx, dump, delimiter, output_dir, strict):
    profile = _profile(ctx)
    delimiter = delimiter or profile.delimiter
    strict = strict or profile.strict

    dump_file = _read_dump(dump, profile)
    result = dump_file.segment(delimiter, profile.remark_marker)
    if result.unterminated is not None and strict:
        _fail_unterminated(dump_file.name, result.unterminated)

    stmts = [s.strip() for s in result.statements if s.strip()]
    if output_dir is None:
        click.echo("\n\n".join(f"{s}{delimiter}" for s in stmts))
        return

    out = pathlib.Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    for written, stmt in enumerate(stmts, 1):
        (out / f"{written:04d}.sql").write_text(f"{stmt}{delimiter}\n", encoding=profile.encoding)
    click.echo(f"Wrote {len(stmts)} statement(s) to {out}")


@main.command()
@click.argument("path", type=click.Path(exists=True))
@_common_opts
@click.pass_context
def stats(ctx, path, strict):
    profile = _profile(ctx)
    strict = strict or profile.strict

    try:
        dumps = discover(pathlib.Path(path), profile.encoding)
    except UnicodeDecodeError as exc:
        _decode_failed(path, profile.encoding, exc)
    if not dumps:
        click.echo(f"No .sql files under {path}")
        return

    broken: list[str] = []
    for dump in dumps:
        result = dump.segment(profile.delimiter, profile.remark_marker)
        stmts = [s for s in result.statements if s.strip()]
        flag = "  UNTERMINATED" if result.unterminated is not None else ""
        click.echo(
            f"{dump.name}  statements={len(stmts)}  sha256={dump.checksum[:12]}{flag}"
        )
        kinds = tally(stmts)
        for kind, count in sorted(kinds.items()):
            click.echo(f"  {kind:<10} {count}")
        if result.unterminated is not None:
            broken.append(dump.name)

    if broken and strict:
        click.echo(f"Unterminated literal in: {', '.join(broken)}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
