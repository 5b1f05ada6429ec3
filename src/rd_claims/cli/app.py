"""Typer CLI for managing claims and projects."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Mapping
from typing import Any, NoReturn, TypeVar

import typer

from rd_claims.api import ApiError, get_error_message
from rd_claims.auth import AuthProvider
from rd_claims.domain import (
    MOCK_USERS,
    Claim,
    ClaimStatus,
    ClaimWithProjects,
    Project,
    User,
)
from rd_claims.loaders import ClaimsLoader, ProjectsLoader, ResourceLoader
from rd_claims.utils import format_amount, format_date_range, format_timestamp
from rd_claims.validation import (
    validate_create_claim,
    validate_create_project,
    validate_update_project,
)
from rd_claims.workflow import InvalidTransitionError, allowed_transitions

from .deps import current_user, get_container, run_session

T = TypeVar("T")

app = typer.Typer(help="R&D claim tracker command-line interface")
claims_app = typer.Typer(help="Create, review and link claims")
projects_app = typer.Typer(help="Manage R&D projects")
app.add_typer(claims_app, name="claims")
app.add_typer(projects_app, name="projects")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP exchanges"),
) -> None:
    level = logging.DEBUG if verbose else get_container().settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _fail(message: str) -> NoReturn:
    typer.echo(message)
    raise typer.Exit(code=1)


def _run_api(coro: Awaitable[T]) -> T:
    """Run one gateway call, mapping API failures to exit code 1."""

    try:
        return run_session(get_container(), coro)
    except ApiError as exc:
        _fail(f"Error: {get_error_message(exc)}")


def _load(loader: ResourceLoader[T]) -> tuple[T, ...]:
    items = run_session(get_container(), loader.refresh())
    if loader.error is not None:
        _fail(f"Error: {loader.error}")
    return items


def _parse_status(value: str) -> ClaimStatus:
    for status in ClaimStatus:
        if status.value.lower() == value.strip().lower():
            return status
    choices = ", ".join(status.value for status in ClaimStatus)
    raise typer.BadParameter(f"status must be one of: {choices}")


def _parse_number(value: str) -> int | float | str:
    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            continue
    return value


def _report_errors(errors: Mapping[str, str]) -> NoReturn:
    for path, message in errors.items():
        typer.echo(f"{path}: {message}")
    raise typer.Exit(code=1)


def _claim_line(claim: Claim) -> str:
    period = format_date_range(claim.claim_period.start_date, claim.claim_period.end_date)
    return (
        f"{claim.claim_id}\t{claim.company_name}\t{period}\t"
        f"{format_amount(claim.amount)}\t{claim.status}"
    )


def _project_line(project: Project) -> str:
    return f"{project.project_id}\t{project.name}\t{project.description}"


def _user_label(user: User) -> str:
    role = user.role.value if user.role is not None else "no role"
    return f"{user.name} ({role})"


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("API URL:\t" + settings.api_url)
    typer.echo("State File:\t" + str(settings.state_file))


@app.command("login")
def login(user_id: str) -> None:
    """Switch the current mock user."""

    user = MOCK_USERS.get(user_id)
    if user is None:
        choices = ", ".join(MOCK_USERS)
        _fail(f"Unknown user '{user_id}'. Available: {choices}")
    with AuthProvider(get_container().storage) as auth:
        auth.set_current_user(user)
    typer.echo(f"Logged in as {_user_label(user)}")


@app.command("logout")
def logout() -> None:
    """Forget the current mock user."""

    with AuthProvider(get_container().storage) as auth:
        auth.set_current_user(None)
    typer.echo("Logged out")


@app.command("whoami")
def whoami() -> None:
    """Show the current mock user."""

    user = current_user(get_container())
    if user is None:
        typer.echo("Not logged in")
        return
    typer.echo(f"{user.user_id}\t{_user_label(user)}")


@claims_app.command("list")
def claims_list(
    status: str | None = typer.Option(None, help="Draft, Submitted or Approved"),
) -> None:
    """List claims, optionally filtered by status."""

    status_filter = _parse_status(status) if status else None
    claims = _load(ClaimsLoader(get_container().api.claims, status_filter))
    if not claims:
        typer.echo("No claims found. Create one to get started!")
        return
    for claim in claims:
        typer.echo(_claim_line(claim))


@claims_app.command("show")
def claims_show(claim_id: str) -> None:
    """Show one claim with its linked projects and the status changes on offer."""

    claim: ClaimWithProjects = _run_api(get_container().api.claims.get(claim_id))
    user = current_user(get_container())

    typer.echo(_claim_line(claim))
    if claim.projects:
        typer.echo(f"Linked projects ({len(claim.projects)}):")
        for project in claim.projects:
            typer.echo(f"  {project.project_id}\t{project.name} - {project.description}")
    else:
        typer.echo("No projects linked yet")
    choices = ", ".join(allowed_transitions(claim.status, user)) or "(none)"
    typer.echo(f"Status changes available: {choices}")
    typer.echo(f"Created: {format_timestamp(claim.created_at)}")


@claims_app.command("create")
def claims_create(
    company: str = typer.Option(..., "--company", help="Company name"),
    start: str = typer.Option(..., "--start", help="Period start, YYYY-MM-DD"),
    end: str = typer.Option(..., "--end", help="Period end, YYYY-MM-DD"),
    amount: str = typer.Option(..., "--amount", help="Amount in pence"),
    project: list[str] | None = typer.Option(None, "--project", help="Project id to link"),
) -> None:
    """Validate and create a claim."""

    form: dict[str, Any] = {
        "companyName": company,
        "claimPeriod": {"startDate": start, "endDate": end},
        "amount": _parse_number(amount),
    }
    if project:
        form["projectIds"] = list(project)
    result = validate_create_claim(form)
    if not result.ok:
        _report_errors(result.errors)

    claim = _run_api(get_container().api.claims.create(result.unwrap()))
    typer.echo(f"Created claim {claim.claim_id}")


@claims_app.command("set-status")
def claims_set_status(claim_id: str, status: str) -> None:
    """Move a claim to another status, as the current user's role allows."""

    target = _parse_status(status)
    container = get_container()
    user = current_user(container)

    async def _change() -> Claim:
        claim = await container.api.claims.get(claim_id)
        return await container.workflow.change_status(claim, target, user)

    try:
        updated = _run_api(_change())
    except InvalidTransitionError as exc:
        _fail(str(exc))
    typer.echo(f"Status updated to {updated.status}")


@claims_app.command("delete")
def claims_delete(claim_id: str) -> None:
    """Delete a claim."""

    _run_api(get_container().api.claims.delete(claim_id))
    typer.echo(f"Deleted claim {claim_id}")


@claims_app.command("link")
def claims_link(claim_id: str, project_ids: list[str]) -> None:
    """Link one or more projects to a claim."""

    _run_api(get_container().api.claims.link_projects(claim_id, project_ids))
    typer.echo("Projects linked successfully")


@claims_app.command("unlink")
def claims_unlink(claim_id: str, project_id: str) -> None:
    """Remove one project from a claim."""

    _run_api(get_container().api.claims.unlink_project(claim_id, project_id))
    typer.echo("Project unlinked successfully")


@projects_app.command("list")
def projects_list() -> None:
    """List projects."""

    projects = _load(ProjectsLoader(get_container().api.projects))
    if not projects:
        typer.echo("No projects found. Create one to get started!")
        return
    for project in projects:
        typer.echo(_project_line(project))


@projects_app.command("show")
def projects_show(project_id: str) -> None:
    """Show a project with the claims it is linked to."""

    project = _run_api(get_container().api.projects.get(project_id))
    typer.echo(_project_line(project))
    if not project.claims:
        typer.echo("Not linked to any claims")
        return
    typer.echo(f"Linked claims ({len(project.claims)}):")
    for claim in project.claims:
        typer.echo("  " + _claim_line(claim))


@projects_app.command("create")
def projects_create(
    name: str = typer.Option(..., "--name"),
    description: str = typer.Option(..., "--description"),
) -> None:
    """Validate and create a project."""

    result = validate_create_project({"name": name, "description": description})
    if not result.ok:
        _report_errors(result.errors)
    project = _run_api(get_container().api.projects.create(result.unwrap()))
    typer.echo(f"Created project {project.project_id}")


@projects_app.command("update")
def projects_update(
    project_id: str,
    name: str | None = typer.Option(None, "--name"),
    description: str | None = typer.Option(None, "--description"),
) -> None:
    """Rename a project or change its description."""

    changes = {
        key: value
        for key, value in (("name", name), ("description", description))
        if value is not None
    }
    if not changes:
        _fail("Nothing to update; pass --name and/or --description")
    result = validate_update_project(changes)
    if not result.ok:
        _report_errors(result.errors)
    project = _run_api(get_container().api.projects.update(project_id, result.unwrap()))
    typer.echo(f"Updated project {project.project_id}")


@projects_app.command("delete")
def projects_delete(project_id: str) -> None:
    """Delete a project."""

    _run_api(get_container().api.projects.delete(project_id))
    typer.echo(f"Deleted project {project_id}")
