"""Main CLI entry point for cc-skill."""
import logging
import sys
from io import StringIO
from pathlib import Path
from typing import Dict, List

import click

from ccskill import __version__
from ccskill.core.errors import CcSkillError
from ccskill.core.paths import ScopePaths
from ccskill.models.result import BatchResult, OperationAction, OperationResult
from ccskill.models.skill import Skill, SkillScope


def _error(message: str) -> None:
    click.echo(click.style("Error: ", fg="red", bold=True) + message)


def _scope(local: bool) -> SkillScope:
    return SkillScope.LOCAL if local else SkillScope.GLOBAL


def _resolve_names(paths: ScopePaths, name: str, use_set: bool) -> List[str]:
    """Expand NAME into skill names, aborting on configuration errors."""
    from ccskill.core.skillsets import expand

    if not use_set:
        return [name]

    try:
        names = expand(paths.skillsets_file, name)
    except CcSkillError as e:
        _error(str(e))
        raise click.Abort()

    click.echo(f"Skill set '{name}': {len(names)} skill(s)")
    return names


def _echo_result(result: OperationResult) -> None:
    """Print one per-skill line."""
    scope = f" ({result.scope.value})" if result.scope else ""

    if result.action in (OperationAction.INSTALLED, OperationAction.REMOVED):
        click.echo(
            click.style(f"✓ {result.name}", fg="green") +
            f"{scope} - {result.action.value}"
        )
    elif result.action == OperationAction.ALREADY_SATISFIED:
        click.echo(
            click.style(f"• {result.name}", fg="yellow") +
            f" - {result.detail}"
        )
    else:
        click.echo(
            click.style(f"✗ {result.name}", fg="red") +
            f" - {result.detail or result.action.value}"
        )


def _echo_available(skills: Dict[str, Skill]) -> None:
    click.echo("\nAvailable skills:")
    for skill in skills.values():
        status = " (installed)" if skill.installed else ""
        click.echo(f"  {skill.name}{status}")


def _run(ctx: click.Context, name: str, local: bool, use_set: bool, operation) -> None:
    """Shared body of the add and remove commands."""
    from ccskill.core.batch import BatchOperation, run_batch
    from ccskill.core.scanner import scan

    paths: ScopePaths = ctx.obj
    names = _resolve_names(paths, name, use_set)

    try:
        batch: BatchResult = run_batch(names, _scope(local), operation, paths)
    except CcSkillError as e:
        _error(str(e))
        raise click.Abort()

    for result in batch.results:
        _echo_result(result)

    # Single add of an unknown skill: show what is available
    if (
        not use_set
        and operation == BatchOperation.INSTALL
        and batch.results[0].action == OperationAction.NOT_FOUND
    ):
        _echo_available(scan(paths))

    verb = "installed" if operation == BatchOperation.INSTALL else "removed"

    if len(batch.results) > 1:
        click.echo()
        if batch.ok:
            click.echo(click.style(
                f"Successfully {verb} {batch.succeeded} skill(s).", fg="green", bold=True
            ))
        else:
            click.echo(
                f"{verb.capitalize()}: {batch.succeeded} skill(s), " +
                click.style(f"Failed: {batch.failed}", fg="red")
            )

    if not batch.ok:
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--source', 'source_root',
    envvar='CC_SKILL_SOURCE',
    type=click.Path(file_okay=False, path_type=Path),
    default='.',
    help='Directory containing skills (default: current directory)'
)
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.pass_context
def cli(ctx: click.Context, source_root: Path, verbose: bool) -> None:
    """cc-skill - Claude Skills Manager

    Link skill directories into ~/.claude/skills (global) or
    ./.claude/skills (local).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = ScopePaths.from_environment(source_root)


@cli.command()
def version() -> None:
    """Show cc-skill version."""
    click.echo(f"cc-skill version {__version__}")


@cli.command()
@click.argument('name')
@click.option('--local', is_flag=True, help='Install to project scope (./.claude/skills/)')
@click.option('--set', 'use_set', is_flag=True, help='Treat NAME as a skill set from skillsets.yaml')
@click.pass_context
def add(ctx: click.Context, name: str, local: bool, use_set: bool) -> None:
    """Add a skill (or skill set) by linking it into a scope."""
    from ccskill.core.batch import BatchOperation

    _run(ctx, name, local, use_set, BatchOperation.INSTALL)


@cli.command()
@click.argument('name')
@click.option('--local', is_flag=True, help='Remove from project scope (./.claude/skills/)')
@click.option('--set', 'use_set', is_flag=True, help='Treat NAME as a skill set from skillsets.yaml')
@click.pass_context
def remove(ctx: click.Context, name: str, local: bool, use_set: bool) -> None:
    """Remove a skill (or skill set) link."""
    from ccskill.core.batch import BatchOperation

    _run(ctx, name, local, use_set, BatchOperation.UNINSTALL)


def _format_table(skills: Dict[str, Skill]) -> str:
    from rich.console import Console
    from rich.table import Table

    table = Table(title="Skills")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Status", style="magenta")
    table.add_column("Source", style="white", overflow="fold")

    for skill in skills.values():
        status = skill.status.value
        if skill.installed:
            status = f"[green]{status}[/green]"
        table.add_row(skill.name, status, str(skill.path))

    console = Console(file=StringIO(), force_terminal=True)
    console.print(table)
    return console.file.getvalue()


@cli.command(name='list')
@click.option(
    '--format', 'output_format',
    type=click.Choice(['text', 'table']),
    default='text',
    help='Output format (text, table)'
)
@click.pass_context
def list_skills(ctx: click.Context, output_format: str) -> None:
    """List all skills available in the source directory."""
    from ccskill.core.scanner import scan

    paths: ScopePaths = ctx.obj

    try:
        skills = scan(paths)
    except (CcSkillError, OSError) as e:
        _error(str(e))
        raise click.Abort()

    if not skills:
        click.echo(f"No skills found in {paths.source_root}")
        return

    if output_format == 'table':
        click.echo(_format_table(skills))
        return

    click.echo(f"Skills in {paths.source_root}:\n")
    for skill in skills.values():
        status = f" (installed: {skill.scope.value})" if skill.installed else ""
        click.echo(f"  {skill.name}{status}")


@cli.command()
@click.pass_context
def sets(ctx: click.Context) -> None:
    """List skill sets defined in skillsets.yaml."""
    from ccskill.core.skillsets import load_skillsets

    paths: ScopePaths = ctx.obj

    try:
        skillsets = load_skillsets(paths.skillsets_file)
    except CcSkillError as e:
        _error(str(e))
        raise click.Abort()

    if not skillsets:
        click.echo("No skill sets defined")
        return

    for set_name, names in skillsets.items():
        click.echo(click.style(f"{set_name}:", fg="cyan", bold=True))
        for name in names:
            click.echo(f"  • {name}")


@cli.command()
@click.option('--quiet', is_flag=True, help='Only show problems')
@click.pass_context
def check(ctx: click.Context, quiet: bool) -> None:
    """Check that skill links in both scopes point at existing skills."""
    from ccskill.core.checker import check_links

    paths: ScopePaths = ctx.obj
    results = check_links(paths)

    if not results:
        if not quiet:
            click.echo("No skills to check")
        sys.exit(0)

    for result in results:
        label = f"{result.skill_name} ({result.scope.value})"
        if result.status == "ok":
            if not quiet:
                click.echo(click.style("✓ ", fg="green") + f"{label} - OK")
        elif result.status == "unmanaged":
            if not quiet:
                click.echo(click.style("! ", fg="yellow") + f"{label} - {result.error_message}")
        else:
            click.echo(click.style("✗ ", fg="red") + f"{label} - {result.error_message}")

    ok_count = sum(1 for r in results if r.status == "ok")
    broken_count = sum(1 for r in results if r.status == "broken_symlink")

    if not quiet:
        click.echo()
        click.echo(f"Checked: {ok_count}/{len(results)} links OK")
        if broken_count > 0:
            click.echo(f"Broken: {broken_count} link(s) (run 'cc-skill remove <name>' to clean up)")

    sys.exit(1 if broken_count > 0 else 0)


if __name__ == "__main__":
    cli()
