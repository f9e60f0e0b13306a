"""CLI interface for Pedigree Verifier."""

import asyncio
import json
from enum import Enum
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .config import load_config
from .errors import InvalidRequestError, PedigreeVerifierError
from .logging import configure_logging

app = typer.Typer(
    name="pedigree-verifier",
    help="Cane Corso pedigree and health verification",
    add_completion=False,
)
console = Console()


class LogLevelName(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _load_config():
    """Load configuration, reporting bad settings instead of raising."""
    try:
        return load_config()
    except ValueError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    log_level: LogLevelName = typer.Option(
        LogLevelName.WARNING, "--log-level", case_sensitive=False, help="Logging level"
    ),
):
    """Configure logging for every command."""
    configure_logging(log_level.value)


@app.command()
def verify(
    dog_id: str = typer.Option(None, "--id", help="Registry id of the dog"),
    name: str = typer.Option(None, "--name", "-n", help="Registered name to search for"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the outcome as JSON"),
):
    """Verify a dog by registry id or by name."""
    config = _load_config()

    async def run():
        from .service import VerificationService
        from .sources.canecorso import CaneCorsoPedigreeSource

        async with CaneCorsoPedigreeSource(config.registry) as source:
            service = VerificationService(source)
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                task = progress.add_task("Querying registry...", total=None)
                outcome = await service.verify(dog_id=dog_id, name=name)
                progress.update(task, completed=True)
            return outcome

    try:
        outcome = asyncio.run(run())
    except InvalidRequestError as e:
        console.print(f"[red]Error: {e}[/red]")
        if e.example:
            console.print(f"[dim]Example: pedigree-verifier {e.example}[/dim]")
        raise typer.Exit(1)
    except PedigreeVerifierError as e:
        console.print(f"[red]Verification error: {e}[/red]")
        raise typer.Exit(1)

    if outcome.message:
        console.print(f"[bold]{outcome.message}[/bold]")
    if outcome.profile:
        _display_profile(outcome.profile)
    else:
        _display_candidates(outcome.results)

    if output:
        output.write_text(outcome.model_dump_json(indent=2))
        console.print(f"[green]Outcome saved to {output}[/green]")


@app.command()
def parse(
    html_file: Path = typer.Argument(..., help="Saved profile page"),
    dog_id: str = typer.Option(..., "--id", help="Registry id the page belongs to"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the record as JSON"),
):
    """Extract and score a saved profile page without network access."""
    from .extractors.document import LabeledDocument
    from .extractors.profile import extract_profile
    from .service import ProfileReport

    if not html_file.exists():
        console.print(f"[red]Error: File not found: {html_file}[/red]")
        raise typer.Exit(1)

    registry = _load_config().registry
    document = LabeledDocument.from_html(html_file.read_text(encoding="utf-8"))
    record = extract_profile(
        document,
        dog_id,
        base_url=registry.base_url,
        source=registry.source_name,
        source_url=registry.profile_url(dog_id),
    )
    report = ProfileReport.from_record(record)
    _display_profile(report)

    if output:
        output.write_text(record.model_dump_json(indent=2))
        console.print(f"[green]Record saved to {output}[/green]")


@app.command()
def save(
    subject_id: str = typer.Argument(..., help="Dog UUID in the local store"),
    record_file: Path = typer.Argument(..., help="Record JSON written by 'parse' or 'verify'"),
):
    """Save health and pedigree rows for a previously extracted record."""
    from .models.record import CanineIdentityRecord

    if not record_file.exists():
        console.print(f"[red]Error: File not found: {record_file}[/red]")
        raise typer.Exit(1)

    config = _load_config()
    try:
        sink_config = config.sink_config()
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    try:
        data = json.loads(record_file.read_text(encoding="utf-8"))
        # Accept either a bare record or a verify outcome
        if isinstance(data, dict) and isinstance(data.get("profile"), dict):
            data = data["profile"].get("record")
        record = CanineIdentityRecord.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Error: not a valid record file: {escape(str(e))}[/red]")
        console.print("[dim]Expected a record written by 'parse' or 'verify'[/dim]")
        raise typer.Exit(1)

    async def run():
        from .service import VerificationService
        from .sinks.supabase import SupabaseSink

        async with SupabaseSink(sink_config) as sink:
            return await VerificationService(sink=sink).save(subject_id, record)

    try:
        outcome = asyncio.run(run())
    except PedigreeVerifierError as e:
        console.print(f"[red]Save error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]{outcome.message}[/green]")
    console.print(f"Trust score: [bold]{outcome.trust_score.points}[/bold]/{outcome.trust_score.max_possible}")


def _display_profile(report) -> None:
    """Display a record and its score."""
    record = report.record
    score = report.score

    table = Table(title=record.registered_name or f"Dog {record.source_id}")
    table.add_column("Field")
    table.add_column("Value")

    table.add_row("Registry ID", record.source_id)
    table.add_row("Sex", record.sex.value if record.sex else "")
    table.add_row("Sire", record.sire.name or "" if record.sire else "")
    table.add_row("Dam", record.dam.name or "" if record.dam else "")
    table.add_row("Ped#", record.pedigree_number or "")
    table.add_row("DOB", record.date_of_birth or "")
    table.add_row("Colour", record.color or "")
    table.add_row("HD", record.hip_score or "")
    table.add_row("ED", record.elbow_score or "")
    table.add_row("DSRA", f"{record.dsra_result or ''}{' (certified)' if record.dsra_certified else ''}")
    table.add_row("DVL2", f"{record.dvl2_result or ''}{' (certified)' if record.dvl2_certified else ''}")
    if record.inbreeding_coefficient_percent is not None:
        table.add_row("Inbreeding", f"{record.inbreeding_coefficient_percent:.2f}%")
    table.add_row("Children", str(len(record.children)))
    table.add_row("Siblings", str(len(record.siblings)))

    console.print(table)

    awarded = ", ".join(sorted(score.breakdown)) or "none"
    console.print(
        Panel(
            f"[bold]{score.points}[/bold]/{score.max_possible}\n[dim]Awarded: {awarded}[/dim]",
            title="Verification Score",
        )
    )


def _display_candidates(candidates) -> None:
    """Display search candidates."""
    if not candidates:
        return

    table = Table(title="Matching Dogs")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("DOB")
    table.add_column("HD")
    table.add_column("ED")

    for c in candidates:
        table.add_row(
            c.external_id or "",
            c.name or "",
            c.date_of_birth or "",
            c.hip_score or "",
            c.elbow_score or "",
        )

    console.print(table)
    console.print("[dim]Re-run with --id to verify one of these dogs[/dim]")


if __name__ == "__main__":
    app()
