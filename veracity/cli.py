#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: cli.py
# Project: veracity
# Description: Command line interface for the article analyzer
# Created: 2026-10-19 13:04:12
# Modified: 2026-10-20 10:20:11

import sys
import json as j
import logging
import click

from pathlib import Path
from typing import Optional, List, Any, Tuple

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.markup import escape
from rich.logging import RichHandler
from rich import box

from veracity.__version__ import __version__
from veracity.analyzer import AnalysisResult, analyze as analyze_article
from veracity.classifier import AUTHENTIC
from veracity.config import LOG_LEVEL, HISTORY_LIMIT, KEYWORD_DISPLAY_LIMIT
from veracity.exceptions import VeracityError
from veracity.history import AnalysisHistory
from veracity.samples import SAMPLE_ARTICLES, get_sample

# Setup logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("veracity")

# Setup console
console = Console()

LEVEL_STYLES = {
    "high": "bold",
    "medium": "",
    "low": "dim",
}

FEATURE_DESCRIPTIONS = {
    "sentiment": "Polarity of loaded vocabulary (-1 to 1)",
    "complexity": "Sentence and word length (0 to 1)",
    "credibility": "Attribution versus sensationalism (0 to 1)",
    "bias": "Absolutist and charged language (0 to 1)",
}


# Utility functions
def truncate(text: str, max_length: int = 100) -> str:
    text = " ".join(text.split())
    return f"{text[:max_length]}..." if len(text) > max_length else text


def handle_output(
    data: Any,
    save_path: Optional[str] = None,
    json_output: bool = False,
):
    """Write results as JSON to stdout or a file"""
    output = j.dumps(data, indent=4, ensure_ascii=False)

    if save_path:
        with open(save_path, 'w', encoding='utf-8') as f:
            f.write(output)
        console.print(f"[green]Output saved to:[/] {escape(save_path)}")

    if json_output:
        click.echo(output)

    return output


def read_sources(sources: Tuple[str, ...]) -> List[Tuple[str, str]]:
    """
    Read article text from files, or stdin for '-' or when piped

    Returns:
        List[Tuple[str, str]]: (source name, text) pairs
    """
    articles = []

    if not sources:
        if sys.stdin.isatty():
            return articles
        sources = ("-",)

    for source in sources:
        if source == "-":
            articles.append(("stdin", sys.stdin.read()))
            continue

        path = Path(source).expanduser()
        if not path.is_file():
            raise click.BadParameter(f"No such file '{source}'", param_hint="SOURCES")
        articles.append((str(path), path.read_text(encoding="utf-8")))

    return articles


def render_result(result: AnalysisResult, source: Optional[str] = None) -> Group:
    """Build the rich renderable for a single analysis"""
    color = "green" if result.label == AUTHENTIC else "red"
    level = result.confidence_level

    verdict = Text.assemble(
        (result.label.upper(), f"bold {color}"),
        "  ",
        (f"{result.confidence:.1f}% ", color),
        (f"{level.title()} Confidence", LEVEL_STYLES[level]),
    )

    table = Table(box=box.ROUNDED, expand=True)
    table.add_column("Feature", style="bold cyan", no_wrap=True)
    table.add_column("Score", justify="right")
    table.add_column("Meaning", style="dim")

    for name, value in result.features.to_dict().items():
        table.add_row(name.title(), f"{value:.3f}", FEATURE_DESCRIPTIONS[name])

    keywords = result.keywords[:KEYWORD_DISPLAY_LIMIT]
    keyword_line = Text("Keywords: ", style="bold")
    keyword_line.append(", ".join(keywords) if keywords else "none", style="magenta")

    heading = result.title or truncate(result.content, 60)
    if source:
        heading = f"{heading} ({source})"

    return Group(
        Panel(verdict, title=escape(heading), border_style=color, expand=True),
        table,
        keyword_line,
    )


def display_history(history: AnalysisHistory):
    """Pretty-print retained results, newest first"""
    table = Table(
        title=f"Analysis History ({len(history)})",
        box=box.ROUNDED,
        expand=True,
        show_lines=True
    )
    table.add_column("Time", style="cyan", no_wrap=True)
    table.add_column("Label", no_wrap=True)
    table.add_column("Confidence", justify="right")
    table.add_column("Article", overflow="fold")

    for result in history:
        color = "green" if result.label == AUTHENTIC else "red"
        table.add_row(
            result.created_at.strftime("%H:%M:%S"),
            f"[{color}]{result.label}",
            f"{result.confidence:.1f}%",
            escape(result.title or truncate(result.content)),
        )

    console.print(table)


# Main CLI group
@click.group()
@click.option('--debug', is_flag=True, help='Show debug logging')
@click.version_option(version=__version__)
def cli(debug: bool):
    """
    veracity: Lexical fake news detector

    Scores articles on sentiment, complexity, credibility and bias and labels
    them authentic or fabricated.
    """
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@click.argument('sources', nargs=-1)
@click.option('--text', help='Analyze this text instead of reading files')
@click.option('--title', default='', help='Article title')
@click.option('--output', help='Save JSON results to a file')
@click.option('--json', is_flag=True, help='Output results as JSON')
def analyze(
    sources: Tuple[str, ...],
    text: Optional[str],
    title: str,
    output: Optional[str],
    json: bool
):
    """Analyze articles from files, stdin, or --text"""
    if text is not None:
        articles = [("text", text)]
    else:
        articles = read_sources(sources)

    if not articles:
        console.print("[yellow]No input source provided.[/yellow]")
        return

    results = []
    try:
        for source, content in articles:
            results.insert(0, analyze_article(content, title))
    except VeracityError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))} ({escape(source)})")
        sys.exit(1)

    # Exports carry every result; only the history view is capped
    data = results[0].to_dict() if len(results) == 1 else [r.to_dict() for r in results]

    if json or output:
        handle_output(data, output, json)
        if json:
            return

    if len(results) == 1:
        console.print(render_result(results[0]))
    else:
        history = AnalysisHistory(HISTORY_LIMIT)
        for result in reversed(results):
            history.add(result)
        display_history(history)


@cli.command()
def samples():
    """List the sample articles"""
    table = Table(title="Sample Articles", box=box.ROUNDED, expand=True, show_lines=True)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Example of", no_wrap=True)

    for index, article in enumerate(SAMPLE_ARTICLES, start=1):
        color = "green" if article.expected == AUTHENTIC else "red"
        table.add_row(str(index), escape(article.title), f"[{color}]{article.expected}")

    console.print(table)


@cli.command()
@click.argument('index', type=int)
@click.option('--json', is_flag=True, help='Output results as JSON')
def sample(index: int, json: bool):
    """Analyze sample article INDEX"""
    try:
        article = get_sample(index)
    except VeracityError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    result = analyze_article(article.content, article.title)

    if json:
        handle_output(result.to_dict(), json_output=True)
        return

    console.print(render_result(result, source=f"sample {index}"))


def main():
    try:
        cli()
    except Exception as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        if '--debug' in sys.argv:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)

if __name__ == "__main__":
    main()
