"""CLI interface for ccswitch."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from ccswitch import __version__
from ccswitch.config import CONFIG_DIR_ENV, UI_HOST, UI_PORT, Paths
from ccswitch.errors import CcsError, NotFoundError
from ccswitch.launch import copy_to_clipboard, launch_assistant, open_terminal
from ccswitch.profiles import ProfileStore, describe
from ccswitch.projects import Project, ProjectStore
from ccswitch.resolver import current_profile, mask_token
from ccswitch.switch import switch_profile
from ccswitch.ui import serve


def styled(text: str, **kwargs) -> str:
    return click.style(text, **kwargs)


def info(msg: str) -> None:
    click.echo(f"  {msg}")


def success(msg: str) -> None:
    click.echo(f"  {styled(msg, fg='green')}")


def warn(msg: str) -> None:
    click.echo(f"  {styled(msg, fg='yellow')}")


def error(msg: str) -> None:
    click.echo(f"  {styled(msg, fg='red')}")


def heading(msg: str) -> None:
    click.echo(f"\n  {styled(msg, bold=True)}")


class CcsGroup(click.Group):
    """Group that turns ccswitch errors into a red message and exit status 1."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except CcsError as e:
            error(str(e))
            ctx.exit(1)


def _paths(ctx: click.Context) -> Paths:
    return ctx.find_root().obj["paths"]


def pick(prompt: str, labels: list[str]) -> int:
    """Show a numbered list and return the chosen 0-based index."""
    for i, label in enumerate(labels, 1):
        info(f"  {styled(f'{i}.', fg='green')} {label}")
    click.echo()
    choice = click.prompt(f"  {prompt}", type=click.IntRange(1, len(labels)), default=1)
    return choice - 1


@click.group(cls=CcsGroup)
@click.version_option(__version__, "-V", "--version", prog_name="ccs")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=CONFIG_DIR_ENV,
    default=None,
    help="Directory holding settings and catalogs (default: ~/.claude).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_dir: Path | None) -> None:
    """Manage Claude settings profiles and projects."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["paths"] = Paths.from_dir(config_dir)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """List all profile names."""
    store = ProfileStore(_paths(ctx))
    keys = store.list_keys()

    if not keys:
        info("No profiles found.")
        info(f"Profiles file: {store.settings_path}")
        info('Run "ccs open" to edit it, or "ccs ui" for the web UI.')
        return

    heading("Profiles")
    click.echo()
    for i, key in enumerate(keys, 1):
        info(f"  {styled(f'{i}.', fg='green')} {styled(key, fg='yellow')}")
    click.echo()
    info(styled(f"Profiles file: {store.settings_path}", dim=True))
    click.echo()


@cli.command("open")
@click.pass_context
def open_cmd(ctx: click.Context) -> None:
    """Open the profiles file in your editor."""
    store = ProfileStore(_paths(ctx))
    store.ensure_file()
    info(f"Opening {store.settings_path}")
    try:
        click.edit(filename=str(store.settings_path))
    except click.ClickException as e:
        error(f"Could not open editor: {e.format_message()}")
        info(f"Open the file manually: {store.settings_path}")
        ctx.exit(1)
    success("Done editing.")


@cli.command("switch")
@click.argument("profile", required=False)
@click.pass_context
def switch_cmd(ctx: click.Context, profile: str | None) -> None:
    """Switch to PROFILE (pick from a list if omitted)."""
    paths = _paths(ctx)
    store = ProfileStore(paths)
    profiles = store.get_profiles()
    keys = list(profiles)

    if not keys:
        warn("No profiles found.")
        info(f"Add some to {store.settings_path} first.")
        return

    if profile is None:
        labels = []
        for key in keys:
            desc = describe(profiles[key])
            labels.append(styled(key, fg="yellow") + (styled(f" - {desc}", dim=True) if desc else ""))
        heading("Pick a profile")
        click.echo()
        profile = keys[pick("Choice", labels)]

    try:
        result = switch_profile(profile, paths)
    except NotFoundError as e:
        error(str(e))
        info("Available profiles:")
        for key in keys:
            info(f"  - {key}")
        ctx.exit(1)

    success(f"Switched to profile: {result.key}")
    body = result.profile if isinstance(result.profile, dict) else {}
    env = body.get("env") if isinstance(body.get("env"), dict) else {}
    if body.get("model"):
        info(f"Model: {body['model']}")
    if env.get("ANTHROPIC_BASE_URL"):
        info(f"API URL: {env['ANTHROPIC_BASE_URL']}")
    if result.providers_updated:
        info(f"Updated {paths.providers_file}")


@cli.command("current")
@click.pass_context
def current_cmd(ctx: click.Context) -> None:
    """Show which profile is active."""
    paths = _paths(ctx)
    result = current_profile(paths)

    if not result.exists:
        warn(f"No settings file found at {paths.settings_file}")
        info("Claude may not be configured yet.")
        return

    click.echo()
    if result.matched:
        info(f"Current profile: {styled(result.key, fg='green', bold=True)}")
        profile = ProfileStore(paths).get_profiles().get(result.key)
        if isinstance(profile, dict) and profile.get("description"):
            info(styled(f"Description: {profile['description']}", dim=True))
    else:
        info(f"Current profile: {styled('custom configuration', fg='yellow')}")
        info(styled("(matches nothing in the profiles file)", dim=True))

    settings = result.settings if isinstance(result.settings, dict) else {}
    env = settings.get("env") if isinstance(settings.get("env"), dict) else {}

    heading("Details")
    if settings.get("model"):
        info(f"  Model: {styled(str(settings['model']), fg='yellow')}")
    if env.get("ANTHROPIC_BASE_URL"):
        info(f"  API URL: {styled(str(env['ANTHROPIC_BASE_URL']), fg='yellow')}")
    if env.get("ANTHROPIC_AUTH_TOKEN"):
        info(f"  API key: {styled(mask_token(str(env['ANTHROPIC_AUTH_TOKEN'])), dim=True)}")
    if env.get("CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC"):
        info(f"  Non-essential traffic disabled: {styled('yes', fg='yellow')}")
    click.echo()
    info(styled(f"Settings file: {paths.settings_file}", dim=True))
    click.echo()


@cli.command("ui")
@click.option("--host", default=UI_HOST, show_default=True, help="Interface to bind.")
@click.option("--port", default=UI_PORT, show_default=True, type=int, help="Port to listen on.")
@click.option("--no-browser", is_flag=True, help="Don't open a browser window.")
@click.pass_context
def ui_cmd(ctx: click.Context, host: str, port: int, no_browser: bool) -> None:
    """Serve the web UI for editing profiles."""

    def ready(url: str) -> None:
        success(f"Web UI running at {url}")
        info("Press Ctrl+C to stop.")
        if not no_browser:
            click.launch(url)

    try:
        serve(_paths(ctx), host=host, port=port, on_ready=ready)
    except OSError as e:
        error(f"Could not start server on {host}:{port}: {e.strerror or e}")
        ctx.exit(1)
    click.echo()
    info("Server stopped.")


@cli.group("project", cls=CcsGroup)
def project() -> None:
    """Manage known project directories."""


@project.command("list")
@click.pass_context
def project_list(ctx: click.Context) -> None:
    """List registered projects."""
    projects = ProjectStore(_paths(ctx)).get_projects()
    if not projects:
        info('No projects yet. Add one with "ccs project add".')
        return

    heading("Projects")
    click.echo()
    for i, p in enumerate(projects, 1):
        info(f"{styled(f'{i}.', dim=True)} {styled(p.name, fg='cyan')}")
        info(f"   {styled(p.path, dim=True)}")
    click.echo()


def _validate_dir(value: str) -> str:
    resolved = Path(value.strip()).expanduser().resolve()
    if not resolved.exists():
        raise click.BadParameter(f"{resolved} does not exist")
    if not resolved.is_dir():
        raise click.BadParameter(f"{resolved} is not a directory")
    return str(resolved)


@project.command("add")
@click.option("--path", "path_", default=None, help="Project directory.")
@click.option("--name", default=None, help="Project name (default: directory name).")
@click.pass_context
def project_add(ctx: click.Context, path_: str | None, name: str | None) -> None:
    """Register a project directory."""
    store = ProjectStore(_paths(ctx))

    if path_ is None:
        path_ = click.prompt("  Project path", value_proc=_validate_dir)
    else:
        try:
            path_ = _validate_dir(path_)
        except click.BadParameter as e:
            error(e.format_message())
            ctx.exit(1)

    if name is None:
        name = click.prompt("  Project name", default=Path(path_).name or "project")
    name = name.strip()
    if not name:
        error("Project name cannot be empty.")
        ctx.exit(1)

    store.add_project(Project(name=name, path=path_))
    success(f"Added project '{name}' ({path_})")


def _choose_project(projects: list[Project], prompt: str) -> Project:
    labels = [f"{p.name} {styled(f'({p.path})', dim=True)}" for p in projects]
    return projects[pick(prompt, labels)]


def _find_project(store: ProjectStore, name: str) -> Project:
    project = store.get_project(name)
    if project is None:
        raise NotFoundError(f"Project '{name}' does not exist")
    return project


@project.command("remove")
@click.argument("name", required=False)
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation.")
@click.pass_context
def project_remove(ctx: click.Context, name: str | None, yes: bool) -> None:
    """Unregister a project (pick from a list if NAME is omitted)."""
    store = ProjectStore(_paths(ctx))
    if name is None:
        projects = store.get_projects()
        if not projects:
            info('No projects yet. Add one with "ccs project add".')
            return
        name = _choose_project(projects, "Project to remove").name

    if not yes and not click.confirm(f"  Remove project '{name}'?", default=False):
        info("Cancelled.")
        return

    store.remove_project(name)
    success(f"Removed project '{name}'")


@project.command("cd")
@click.argument("name", required=False)
@click.option(
    "--action",
    type=click.Choice(["show", "terminal", "copy"]),
    default=None,
    help="What to do with the directory (asked if omitted).",
)
@click.pass_context
def project_cd(ctx: click.Context, name: str | None, action: str | None) -> None:
    """Go to a project directory."""
    store = ProjectStore(_paths(ctx))
    if name is None:
        projects = store.get_projects()
        if not projects:
            info('No projects yet. Add one with "ccs project add".')
            return
        project = _choose_project(projects, "Project")
    else:
        project = _find_project(store, name)

    if not os.path.isdir(project.path):
        error(f"Project directory not found: {project.path}")
        ctx.exit(1)

    success(f"Project: {project.name}")
    info(f"Path: {project.path}")
    cd_command = f'cd "{project.path}"'

    if action is None:
        click.echo()
        actions = ["show", "terminal", "copy"]
        labels = [
            "Show the cd command",
            "Open a new terminal window here",
            "Copy the path to the clipboard",
        ]
        action = actions[pick("Action", labels)]

    if action == "terminal":
        terminal = open_terminal(project.path)
        if terminal:
            success(f"Opened {terminal} in {project.path}")
            return
        warn("No supported terminal found. Run this instead:")
    elif action == "copy":
        if copy_to_clipboard(project.path):
            success("Path copied to clipboard.")
            return
        warn("No clipboard tool found (install xclip or xsel). Run this instead:")
    else:
        info("To switch to this directory run:")
    click.echo(styled(cd_command, fg="cyan"))


@cli.command("code")
@click.argument("name", required=False)
@click.pass_context
def code_cmd(ctx: click.Context, name: str | None) -> None:
    """Launch claude in a new terminal inside a project."""
    store = ProjectStore(_paths(ctx))
    if name is None:
        projects = store.get_projects()
        if not projects:
            info('No projects yet. Add one with "ccs project add".')
            return
        project = _choose_project(projects, "Project to launch")
    else:
        project = _find_project(store, name)

    info(f"Launching '{project.name}' in {project.path}")
    terminal = launch_assistant(project.path)
    if terminal is None:
        error("No supported terminal found.")
        info(f'Run manually: cd "{project.path}" && claude')
        ctx.exit(1)
    success(f"Started claude in a new {terminal} window.")


cli.add_command(list_cmd, "ls")
cli.add_command(switch_cmd, "use")
cli.add_command(current_cmd, "now")
