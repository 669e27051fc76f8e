"""CLI application for DepReview."""

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from core.errors import DepReviewError, PromptCancelled
from core.interactive import run_interactive
from core.loaders import check_manifest_matches, load_analysis, load_manifest
from core.prompt import CheckboxPrompt
from core.ui import console, make_console

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=make_console(stderr=True), show_path=False)],
        force=True,
    )


def terminal_height() -> int | None:
    """Terminal rows, or None when stdout is not a terminal."""
    if not console.is_terminal:
        return None
    return console.size.height


app = typer.Typer(
    name="depreview",
    help="DepReview - Review outdated dependencies and pick which to upgrade",
    add_completion=False,
)


@app.command()
def review(
    manifest_path: Path = typer.Argument(Path("package.json"), help="Path to the package.json to update"),
    analysis_path: Path = typer.Option(..., "--analysis", "-a", help="Analysis JSON produced by the version checker"),
    output: Path | None = typer.Option(None, "--out", "-o", help="Write the updated manifest here instead"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """DepReview - Select outdated dependencies and update the manifest."""
    configure_logging(verbose)

    try:
        manifest = load_manifest(manifest_path, output_path=output)
        analysis = load_analysis(analysis_path)
        check_manifest_matches(analysis, manifest)

        outcome = run_interactive(
            analysis,
            manifest,
            prompter=CheckboxPrompt(console=console),
            console=console,
            terminal_height=terminal_height(),
        )
        logger.debug("Review finished: %s", outcome.value)

    except PromptCancelled:
        console.print(f"Cancelled, {manifest_path} was not changed", style="red", markup=False)
        raise typer.Exit(130)
    except (DepReviewError, OSError) as e:
        console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
