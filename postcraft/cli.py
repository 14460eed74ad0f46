"""
Postcraft CLI.

Usage:
    postcraft news                          # Show AI news candidates
    postcraft generate                      # Post about a timely AI topic
    postcraft generate --topic "notes..."   # Post from your own notes
    postcraft generate --news 2             # Post seeded from news item #2
    postcraft generate --persona executive  # Apply a persona
    postcraft improve --draft "text..."     # Optimize an existing draft
    postcraft improve --file draft.txt      # Optimize a draft from a file
    postcraft personas                      # List personas
    postcraft config                        # Verify configuration
"""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from postcraft import __version__
from postcraft.compose import PERSONA_LABELS
from postcraft.config import XDG_CONFIG_PATH, get_settings
from postcraft.errors import ConfigurationError
from postcraft.generate import create_post
from postcraft.ingest import fetch_news, topic_from_candidate
from postcraft.logging_config import setup_logging
from postcraft.models import GenerationMode, GenerationOutcome, GenerationRequest, PersonaId

console = Console()

PersonaOption = typer.Option(
    "neutral",
    "--persona",
    "-p",
    help="Persona: neutral, action-oriented, innovative, analytical, executive",
)

app = typer.Typer(
    name="postcraft",
    help="Postcraft - AI LinkedIn post crafter",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="markdown",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        print(f"Postcraft CLI v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging output."
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit."
    ),
):
    """
    Postcraft - AI LinkedIn post crafter
    """
    setup_logging("DEBUG" if verbose else get_settings().log_level)


def _print_outcome(outcome: GenerationOutcome) -> None:
    """Print the post, or the failure and exit 1."""
    if outcome.ok:
        console.print(Panel(outcome.text or "", title="Your post", border_style="green"))
        return

    console.print(Panel(
        outcome.detail,
        title=f"Generation failed ({outcome.error_kind.value})",
        border_style="red",
    ))
    raise typer.Exit(code=1)


def _run_request(request: GenerationRequest) -> None:
    try:
        with console.status("Generating..."):
            outcome = asyncio.run(create_post(request))
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(code=1) from None
    _print_outcome(outcome)


@app.command()
def news(
    url: str | None = typer.Option(None, "--url", help="Feed URL (default: configured feed)"),
) -> None:
    """Show news candidates for inspiration."""
    with console.status("Fetching latest AI news..."):
        candidates = asyncio.run(fetch_news(url))

    if not candidates:
        console.print("[dim]No news items found in the feed, or the feed is empty.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Title", style="white", max_width=50, no_wrap=False)
    table.add_column("Published", style="dim", max_width=20)
    table.add_column("Description", style="dim", max_width=60, no_wrap=False)

    for index, candidate in enumerate(candidates, start=1):
        table.add_row(str(index), candidate.title, candidate.published_at or "", candidate.description)

    console.print(table)


@app.command()
def generate(
    topic: str = typer.Option("", "--topic", "-t", help="Notes, links or a topic (blank: AI picks)"),
    news_index: int | None = typer.Option(
        None, "--news", "-n", min=1, help="Seed the topic from news item N (see 'postcraft news')"
    ),
    persona: str = PersonaOption,
) -> None:
    """Generate a new post."""
    if news_index is not None:
        candidates = asyncio.run(fetch_news())
        if news_index > len(candidates):
            console.print(f"[red]Only {len(candidates)} news items available.[/red]")
            raise typer.Exit(code=1)
        topic = topic_from_candidate(candidates[news_index - 1])

    _run_request(GenerationRequest(topic=topic, persona=PersonaId.parse(persona)))


@app.command()
def improve(
    draft: str = typer.Option("", "--draft", "-d", help="Draft post text"),
    file: Path | None = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read the draft from a file"),
    persona: str = PersonaOption,
) -> None:
    """Rewrite a draft for higher engagement."""
    if file is not None:
        draft = file.read_text(encoding="utf-8")
    if not draft.strip():
        console.print("[red]Provide a draft with --draft or --file.[/red]")
        raise typer.Exit(code=1)

    _run_request(GenerationRequest(
        mode=GenerationMode.IMPROVE,
        draft_text=draft,
        persona=PersonaId.parse(persona),
    ))


@app.command()
def personas() -> None:
    """List available personas."""
    table = Table(title="Personas")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Style", style="dim")
    for persona_id, (name, description) in PERSONA_LABELS.items():
        table.add_row(persona_id.value, name, description)
    console.print(table)


@app.command()
def config() -> None:
    """Verify configuration and show settings."""
    console.print("[bold]Verifying configuration...[/bold]\n")

    console.print("[dim]Config search paths:[/dim]")
    xdg_config = XDG_CONFIG_PATH / "config.env"
    xdg_status = "[green](exists)[/green]" if xdg_config.exists() else "[dim](not found)[/dim]"
    console.print(f"  1. {xdg_config} {xdg_status}")
    local_env = Path(".env")
    local_status = "[green](exists)[/green]" if local_env.exists() else "[dim](not found)[/dim]"
    console.print(f"  2. {local_env.absolute()} {local_status}")
    console.print()

    settings = get_settings()
    console.print("[green]✓[/green] Settings loaded")
    console.print(f"  Gemini model: {settings.gemini_model}")
    console.print(f"  Feed URL: {settings.feed_url}")

    if not settings.has_api_key:
        console.print("[red]✗ Missing GEMINI_API_KEY[/red]")
        raise typer.Exit(code=1)

    console.print(f"  Gemini API key: {settings.gemini_api_key[:6]}...")
    console.print("[green]✓ Configuration valid[/green]")


def cli() -> None:
    """Entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[dim]Aborted.[/dim]")
        raise SystemExit(130) from None


if __name__ == "__main__":
    cli()
