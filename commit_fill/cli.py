"""CLI commands and entry point."""

import os
import stat

import click

from .config import GIT_CONFIG_PATTERN, __version__
from .session import CommitSession, CommitSessionHooks, project_fill_column_hook
from .wrap import fill_message

HOOK_CONTENT = """#!/bin/sh
exec commit-fill wrap "$1"
"""


def load_mapping():
    """Load the effective project widths, exiting with an error if invalid."""
    import commit_fill as cf

    try:
        return cf.load_project_widths(
            git_entries=cf.get_config_entries(GIT_CONFIG_PATTERN)
        )
    except ValueError as exc:
        click.secho(f"Invalid configuration: {exc}", fg="red", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """commit-fill: per-project fill column for commit messages."""
    pass


@cli.command()
@click.option("--url", default=None, help="Remote URL to use instead of origin")
def width(url):
    """Print the fill column for the current project, if one is configured."""
    mapping = load_mapping()
    getter = (lambda: url) if url is not None else None
    session = CommitSession()
    hooks = CommitSessionHooks([project_fill_column_hook(mapping, getter)])
    hooks.run(session)

    if not session.notices:
        return
    for notice in session.notices:
        click.secho(notice, fg="green", err=True)
    click.echo(session.fill_column)


@cli.command()
@click.argument("message_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--width",
    "fill_column",
    type=click.IntRange(min=1),
    default=None,
    help="Fill column to use instead of the project's configured width",
)
def wrap(message_file, fill_column):
    """Refill a commit message file in place (usable as a commit-msg hook)."""
    session = CommitSession(message_path=message_file)
    if fill_column is not None:
        session.set_fill_column(fill_column)
    else:
        hooks = CommitSessionHooks([project_fill_column_hook(load_mapping())])
        hooks.run(session)
        if not session.notices:
            # No project width: leave the message alone.
            return
        for notice in session.notices:
            click.secho(notice, fg="green", err=True)

    with open(session.message_path, encoding="utf-8") as fh:
        original = fh.read()
    filled = fill_message(original, session.fill_column)
    if filled != original:
        with open(session.message_path, "w", encoding="utf-8") as fh:
            fh.write(filled)


@cli.command()
def projects():
    """List configured project widths in lookup order."""
    mapping = load_mapping()
    seen = set()
    for name, value in mapping:
        suffix = " (shadowed)" if name in seen else ""
        seen.add(name)
        click.echo(f"{name}\t{value}{suffix}")


@cli.command(name="install-hook")
@click.option("--force", is_flag=True, help="Overwrite an existing commit-msg hook")
def install_hook(force):
    """Install a commit-msg hook that runs `commit-fill wrap`."""
    import commit_fill as cf

    hooks_dir = cf.get_hooks_dir()
    hook_path = os.path.join(hooks_dir, "commit-msg")
    if os.path.exists(hook_path) and not force:
        click.secho(
            f"{hook_path} already exists; use --force to overwrite.", fg="red", err=True
        )
        raise SystemExit(1)

    os.makedirs(hooks_dir, exist_ok=True)
    with open(hook_path, "w", encoding="utf-8") as fh:
        fh.write(HOOK_CONTENT)
    mode = os.stat(hook_path).st_mode
    os.chmod(hook_path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    click.secho(f"Installed {hook_path}", fg="green")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
