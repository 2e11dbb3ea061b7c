"""Command-line interface for bookpress."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from bookpress.config.defaults import DEFAULT_CONFIG_YAML
from bookpress.config.loader import find_config_file, load_config
from bookpress.config.models import BookpressConfig
from bookpress.errors import BookpressError
from bookpress.export.models import ExportInput
from bookpress.export.service import generate
from bookpress.export.storage import LocalArtifactStore
from bookpress.ir.document import estimate_page_count
from bookpress.ir.styles import generate_style_mappings
from bookpress.parser.docx_parser import DocxParser
from bookpress.parser.upload import validate_manuscript
from bookpress.typography.cover import (
    SPINE_MULTIPLIERS,
    calculate_cover_dimensions,
    calculate_spine_width,
    inches_to_mm,
)
from bookpress.typography.themes import BOOK_THEMES, TRIM_SIZES, lookup_trim_size

app = typer.Typer(
    name="bookpress",
    help="Turn Word manuscripts into print-ready HTML and IDML packages.",
    add_completion=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _load(config: Optional[Path]) -> BookpressConfig:
    if config:
        if not config.exists():
            console.print(f"[red]Configuration file not found: {config}[/red]")
            raise typer.Exit(1)
        return load_config(config)

    auto_config = find_config_file(Path.cwd())
    if auto_config:
        console.print(f"[dim]Using configuration: {auto_config}[/dim]")
        return load_config(auto_config)
    return BookpressConfig()


@app.command()
def convert(
    input_file: Path = typer.Argument(
        ...,
        help="Input Word document (.docx)",
        exists=True,
        readable=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: ./output)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (YAML)",
    ),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: idml, pdf, or both",
    ),
    theme: Optional[str] = typer.Option(None, "--theme", help="Theme id"),
    trim_size: Optional[str] = typer.Option(None, "--trim-size", help="Trim size, e.g. 6x9"),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        "-t",
        help="Override book title",
    ),
) -> None:
    """
    Convert a Word document to print HTML and/or IDML.

    Examples:
        bookpress convert manuscript.docx
        bookpress convert book.docx -f idml --trim-size 5.5x8.5 -o ./dist
    """
    cfg = _load(config)
    export_cfg = cfg.export

    export_type = (format or export_cfg.format).lower()
    if export_type not in ("idml", "pdf", "both"):
        console.print(f"[red]Invalid format: {export_type}. Use 'idml', 'pdf', or 'both'.[/red]")
        raise typer.Exit(1)

    output_dir = output or export_cfg.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    data = input_file.read_bytes()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Parsing document...", total=None)
        try:
            validate_manuscript(data, input_file.name)
            document = DocxParser(cfg.style_map).parse(data)
            progress.update(task, description="[green]Document parsed[/green]")
        except BookpressError as e:
            progress.update(task, description=f"[red]Parse error: {e}[/red]")
            raise typer.Exit(1)

        book_title = title or cfg.metadata.title or document.title
        export_input = ExportInput.build(
            project_id=input_file.stem,
            title=book_title,
            author=cfg.metadata.author,
            chapters=document.chapters,
            theme_id=theme or export_cfg.theme,
            trim_size_key=trim_size or export_cfg.trim_size,
            copyright_page=cfg.copyright,
        )

        task = progress.add_task(f"Generating {export_type} export...", total=None)
        try:
            result = generate(
                export_input,
                export_type,
                LocalArtifactStore(output_dir),
                include_bleed=export_cfg.include_bleed,
                bleed_size=export_cfg.bleed_size,
            )
        except Exception as e:
            progress.update(task, description=f"[red]Export error: {e}[/red]")
            console.print_exception()
            raise typer.Exit(1)
        progress.update(task, description="[green]Export finished[/green]")

    for label, url in (("IDML", result.idml_url), ("HTML", result.html_url), ("PDF", result.pdf_url)):
        if url:
            console.print(f"[green]{label} saved:[/green] {url}")

    requested = {"idml": ["IDML"], "pdf": ["HTML"], "both": ["IDML", "HTML"]}[export_type]
    missing = [
        label
        for label, url in (("IDML", result.idml_url), ("HTML", result.html_url))
        if label in requested and not url
    ]
    console.print()
    if missing:
        console.print(f"[yellow]Conversion finished without: {', '.join(missing)}[/yellow]")
        raise typer.Exit(1)
    console.print("[bold green]Conversion complete![/bold green]")


@app.command()
def info(
    input_file: Path = typer.Argument(
        ...,
        help="Input Word document (.docx)",
        exists=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (YAML)",
    ),
) -> None:
    """
    Show chapters, word count and style mappings of a Word document.
    """
    cfg = _load(config)
    data = input_file.read_bytes()
    try:
        validate_manuscript(data, input_file.name)
        document = DocxParser(cfg.style_map).parse(data)
    except BookpressError as e:
        console.print(f"[red]Error reading document: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]Title:[/bold] {document.title}")
    console.print(f"[bold]Chapters:[/bold] {len(document.chapters)}")
    console.print(f"[bold]Word count:[/bold] {document.total_word_count:,}")
    console.print(f"[bold]Estimated pages:[/bold] {document.estimated_page_count}")
    console.print()

    chapters = Table(title="Chapters")
    chapters.add_column("#", justify="right")
    chapters.add_column("Title")
    chapters.add_column("Words", justify="right")
    chapters.add_column("Styles")
    for chapter in document.chapters:
        chapters.add_row(str(chapter.number), chapter.title, f"{chapter.word_count:,}", ", ".join(chapter.styles))
    console.print(chapters)

    mappings = Table(title="Style mappings")
    mappings.add_column("Source style")
    mappings.add_column("Type")
    mappings.add_column("Target style")
    for mapping in generate_style_mappings(document.styles):
        mappings.add_row(mapping.source_style_name, mapping.source_style_type, mapping.target_style_name)
    console.print(mappings)

    for message in document.messages:
        console.print(f"[yellow]{message}[/yellow]")


@app.command()
def themes() -> None:
    """
    List the available themes and trim sizes.
    """
    theme_table = Table(title="Themes")
    theme_table.add_column("Id")
    theme_table.add_column("Name")
    theme_table.add_column("Font")
    theme_table.add_column("Size", justify="right")
    theme_table.add_column("Chapter start")
    theme_table.add_column("Drop cap")
    for theme in BOOK_THEMES.values():
        style = theme.chapter_style
        theme_table.add_row(
            theme.id,
            theme.name,
            theme.primary_font,
            f"{theme.font_size:g}pt",
            style.chapter_start_page,
            f"{style.drop_cap_lines} lines" if style.drop_cap else "no",
        )
    console.print(theme_table)

    trim_table = Table(title="Trim sizes")
    trim_table.add_column("Key")
    trim_table.add_column("Width (in)", justify="right")
    trim_table.add_column("Height (in)", justify="right")
    for key, size in TRIM_SIZES.items():
        trim_table.add_row(key, f"{size.width:g}", f"{size.height:g}")
    console.print(trim_table)


@app.command()
def spine(
    pages: Optional[int] = typer.Option(None, "--pages", "-p", min=1, help="Page count"),
    words: Optional[int] = typer.Option(None, "--words", "-w", min=1, help="Estimate pages from a word count"),
    paper: str = typer.Option("white", "--paper", help="Paper stock: white, cream, or color"),
    trim_size: str = typer.Option("6x9", "--trim-size", help="Trim size, e.g. 6x9"),
) -> None:
    """
    Calculate spine width and full cover dimensions.
    """
    if paper not in SPINE_MULTIPLIERS:
        console.print(f"[red]Invalid paper type: {paper}. Use 'white', 'cream', or 'color'.[/red]")
        raise typer.Exit(1)
    if pages is None:
        if words is None:
            console.print("[red]Pass --pages or --words.[/red]")
            raise typer.Exit(1)
        pages = estimate_page_count(words)

    width = calculate_spine_width(pages, paper)
    cover = calculate_cover_dimensions(lookup_trim_size(trim_size), pages, paper)

    console.print(f"[bold]Pages:[/bold] {pages}")
    console.print(f"[bold]Spine width:[/bold] {width:.4f} in ({inches_to_mm(width):.2f} mm)")
    console.print(f"[bold]Full cover:[/bold] {cover.full_width:.4f} x {cover.full_height:.4f} in")
    console.print(
        f"[dim]Back cover at {cover.back_cover_x:.4f} in, spine at {cover.spine_x:.4f} in, "
        f"front cover at {cover.front_cover_x:.4f} in[/dim]"
    )


@app.command()
def init(
    output: Path = typer.Option(
        Path("./bookpress.yaml"),
        "--output",
        "-o",
        help="Output configuration file path",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing file",
    ),
) -> None:
    """
    Initialize a new configuration file with defaults.
    """
    if output.exists() and not force:
        console.print(f"[yellow]File already exists: {output}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(1)

    output.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    console.print(f"[green]Configuration file created: {output}[/green]")
    console.print()
    console.print("Edit this file to choose a theme, trim size and copyright page.")


@app.command()
def validate(
    config_path: Path = typer.Argument(
        ...,
        help="Configuration file to validate",
        exists=True,
    ),
) -> None:
    """
    Validate a configuration file.
    """
    try:
        cfg = load_config(config_path)
    except Exception as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    console.print("[green]Configuration is valid![/green]")
    console.print()
    console.print(f"Theme: {cfg.export.theme}")
    console.print(f"Trim size: {cfg.export.trim_size}")
    console.print(f"Format: {cfg.export.format}")
    console.print(f"Output directory: {cfg.export.output_dir}")
    if cfg.export.theme not in BOOK_THEMES:
        console.print(f"[yellow]Unknown theme '{cfg.export.theme}', classic-fiction will be used.[/yellow]")
    if cfg.export.trim_size not in TRIM_SIZES:
        console.print(f"[yellow]Unknown trim size '{cfg.export.trim_size}', 6x9 will be used.[/yellow]")


if __name__ == "__main__":
    app()
