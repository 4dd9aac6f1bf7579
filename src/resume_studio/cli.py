"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
import webbrowser
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from resume_studio.ats.checker import AtsChecker
from resume_studio.config import AppConfig, load_config
from resume_studio.errors import ResumeStudioError
from resume_studio.export.artifacts import (
    EXPORT_FORMATS,
    ExportArtifact,
    docx_artifact,
    html_artifact,
    pdf_artifact,
    tex_artifact,
)
from resume_studio.fitting.autofit import AutoFitScaler
from resume_studio.fitting.measure import EstimatingMeasurer, Measurer, WeasyPrintMeasurer
from resume_studio.models.ats import score_band
from resume_studio.models.resume import ResumeDocument, dump_document, load_document
from resume_studio.models.store import ResumeStore
from resume_studio.rendering.layouts import LAYOUTS, get_layout

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="resume-studio",
    help="Build, fit, export and ATS-check resumes.",
    no_args_is_help=True,
)
console = Console()

BAND_COLORS = {"good": "green", "fair": "yellow", "poor": "red"}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def templates() -> None:
    """List the available resume templates."""
    for layout in LAYOUTS.values():
        kind = "sidebar + main" if layout.has_sidebar else "single column"
        console.print(
            f"  [bold]{layout.template_id.value}[/bold]: {layout.display_name} "
            f"[dim]({layout.typeface}, {kind})[/dim]"
        )


@app.command()
def init(
    output: Path = typer.Argument(Path("resume.json"), help="Where to write the new resume JSON"),
    template: str = typer.Option(None, "--template", "-t", help="Template id"),
    sample: bool = typer.Option(False, "--sample", help="Fill in example content"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Create a resume document to edit."""
    if output.exists() and not force:
        console.print(f"[red]File already exists: {output} (use --force)[/red]")
        raise typer.Exit(1)

    config = load_config()
    store = ResumeStore()
    try:
        store.set_template(get_layout(template or config.export.default_template).template_id)
    except ResumeStudioError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    if sample:
        _fill_sample(store)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_document(store.document), encoding="utf-8")
    console.print(f"[green]Resume created: {output}[/green]")


@app.command()
def preview(
    file: Path = typer.Argument(help="Resume JSON file"),
    template: str = typer.Option(None, "--template", "-t", help="Override the template id"),
    locale: str = typer.Option(None, "--locale", "-l", help="Display locale (en, fr, es)"),
    output: Path = typer.Option(None, "--output", "-o", help="HTML output path"),
    measure: str = typer.Option("auto", "--measure", help="auto, weasyprint or estimate"),
    open_browser: bool = typer.Option(True, "--open/--no-open", help="Open in the browser"),
) -> None:
    """Fit the resume to one page and preview it as HTML."""
    config = load_config()
    document = _load(file, template)
    locale = locale or config.export.default_locale
    scaler = AutoFitScaler(_measurer(measure), config.layout)

    try:
        result = scaler.fit(document, locale)
    except ResumeStudioError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    html_path = output or file.with_suffix(".html")
    html_path.parent.mkdir(parents=True, exist_ok=True)
    html_path.write_text(result.layout.html, encoding="utf-8")

    height = f"{result.measured_height:.0f}px" if result.measured_height else "unknown"
    status = "[green]fits[/green]" if result.converged else "[yellow]best effort[/yellow]"
    console.print(
        Panel(
            f"Template: {result.layout.template_id.value} | Locale: {result.layout.locale}\n"
            f"Scale: {result.fit.scale:.3f} | Spacing: {result.fit.spacing:.3f}\n"
            f"Height: {height} / {result.target_height:.0f}px ({status}, "
            f"{result.iterations} measurements)",
            title="Auto-fit",
        )
    )
    console.print(f"[green]HTML written: {html_path}[/green]")
    if open_browser:
        webbrowser.open(html_path.resolve().as_uri())


@app.command()
def export(
    file: Path = typer.Argument(help="Resume JSON file"),
    fmt: str = typer.Option("pdf", "--format", "-f", help="tex, docx, pdf or html"),
    template: str = typer.Option(None, "--template", "-t", help="Override the template id"),
    locale: str = typer.Option(None, "--locale", "-l", help="Display locale (en, fr, es)"),
    output_dir: Path = typer.Option(Path("./output"), "--output-dir", "-o", help="Output directory"),
    measure: str = typer.Option("auto", "--measure", help="auto, weasyprint or estimate"),
) -> None:
    """Export the resume as LaTeX source, Word document, PDF or HTML."""
    if fmt not in EXPORT_FORMATS:
        console.print(f"[red]Unknown format: {fmt} (expected {', '.join(EXPORT_FORMATS)})[/red]")
        raise typer.Exit(1)

    config = load_config()
    document = _load(file, template)
    locale = locale or config.export.default_locale

    try:
        artifact = _build_artifact(fmt, document, locale, config, measure)
    except ResumeStudioError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    except Exception:
        logger.exception("Export to %s failed", fmt)
        console.print(f"[red]Export to {fmt} failed; run with --verbose for details.[/red]")
        raise typer.Exit(1)

    path = artifact.write(output_dir)
    console.print(f"[green]{artifact.mime_type} written: {path}[/green]")


@app.command()
def ats(
    file: Path = typer.Argument(help="Resume to check (.pdf or .docx)"),
) -> None:
    """Score a resume file for ATS compatibility."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)

    config = load_config()
    checker = AtsChecker(config.ats)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        progress.add_task("Analyzing resume...", total=None)
        result = asyncio.run(checker.check_file(file))

    if result is None:
        console.print(f"[red]{checker.error}[/red]")
        raise typer.Exit(1)

    color = BAND_COLORS[score_band(result.score)]
    b = result.breakdown
    console.print(
        Panel(
            f"[bold {color}]Score: {result.score} / 100[/bold {color}]\n"
            f"Sections: {b.sections:.0f}/20 | Keywords: {b.keywords:.0f}/30 | "
            f"Formatting: {b.formatting:.0f}/15 | Skills: {b.skills:.0f}/15 | "
            f"Clarity: {b.clarity:.0f}/20\n"
            f"Words: {result.details.word_count} | "
            f"Sections found: {', '.join(result.details.found_sections) or '-'}",
            title=f"ATS check: {file.name}",
        )
    )
    if result.strengths:
        console.print("\n[green]Strengths:[/green]")
        for s in result.strengths:
            console.print(f"  + {s}")
    if result.improvements:
        console.print("\n[yellow]Improvements:[/yellow]")
        for s in result.improvements:
            console.print(f"  - {s}")


def _load(file: Path, template: str | None) -> ResumeDocument:
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)
    try:
        document = load_document(file)
        if template:
            document = document.model_copy(
                update={"template_id": get_layout(template).template_id}
            )
    except ValidationError as exc:
        console.print(f"[red]Invalid resume file {file}:[/red]\n{escape(str(exc))}")
        raise typer.Exit(1)
    except ResumeStudioError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    return document


def _measurer(kind: str) -> Measurer:
    if kind == "estimate":
        return EstimatingMeasurer()
    if kind == "weasyprint":
        return WeasyPrintMeasurer()
    if kind != "auto":
        console.print(f"[red]Unknown measurer: {kind} (expected auto, weasyprint or estimate)[/red]")
        raise typer.Exit(1)
    try:
        import weasyprint  # noqa: F401
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, estimating layout height from text metrics")
        return EstimatingMeasurer()
    return WeasyPrintMeasurer()


def _build_artifact(
    fmt: str,
    document: ResumeDocument,
    locale: str,
    config: AppConfig,
    measure: str,
) -> ExportArtifact:
    if fmt == "tex":
        return tex_artifact(document, locale)
    if fmt == "docx":
        return asyncio.run(docx_artifact(document, locale))
    scaler = AutoFitScaler(_measurer(measure), config.layout)
    if fmt == "pdf":
        return pdf_artifact(document, locale, scaler)
    return html_artifact(document, locale, scaler)


def _fill_sample(store: ResumeStore) -> None:
    store.set_personal(
        full_name="Alex Morgan",
        title="Senior Software Engineer",
        email="alex.morgan@example.com",
        phone="+1 555 010 2030",
        location="Berlin, Germany",
        website="linkedin.com/in/alexmorgan",
        summary="Backend engineer with ten years of experience building data platforms.",
    )
    store.add(
        "experience",
        company="Northwind Analytics",
        position="Senior Software Engineer",
        start_date="2021-03",
        current=True,
        description="Led the migration of batch pipelines to streaming.\n"
        "Reduced infrastructure costs by 30%.",
    )
    store.add(
        "experience",
        company="Contoso Labs",
        position="Software Engineer",
        start_date="2016-09",
        end_date="2021-02",
        description="Developed internal APIs used by 40 teams.",
    )
    store.add(
        "projects",
        name="queue-inspector",
        link="https://github.com/alexmorgan/queue-inspector",
        description="Open-source tool for debugging message queues.",
    )
    store.add(
        "education",
        school="Technical University of Munich",
        degree="M.Sc. Computer Science",
        start_date="2014",
        end_date="2016",
    )
    store.add("certifications", name="AWS Solutions Architect", issuer="Amazon", date="2022-05")
    for name in ("Python", "Kafka", "PostgreSQL", "Kubernetes"):
        store.add("skills", name=name)
    store.set_custom_section_title("Languages")
    store.add("custom_items", name="German", city="C1")


if __name__ == "__main__":
    app()
