"""Command-line interface for taskparse."""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import ConfigModel, load_config
from .languages import GERMAN, LanguageConfig, LanguageConfigError, get_language, load_language_file
from .models import ParsedTask, TimeTarget
from .parser import TaskParser

logger = logging.getLogger(__name__)

EPILOG = """\b
Examples:
  parse-task "Meeting morgen 14:00 p1 @Arbeit"
  parse-task --lang en "Meeting tomorrow 2 PM p1 @Work"
  parse-task --lang fr "Réunion demain 14h00 p1 @Travail"
  parse-task --lang es "Reunión mañana 14:00 p1 @Trabajo"
"""

NONE = "[dim](none)[/dim]"


class ParseTaskCommand(click.Command):
    """Command whose usage errors exit with status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def make_console(config: ConfigModel, stderr: bool = False) -> Console:
    """Console honouring the no_color setting."""
    return Console(stderr=stderr, no_color=config.no_color, highlight=False)


def resolve_language(code: str, config: ConfigModel, err_console: Console) -> LanguageConfig:
    """Pick the keyword table for ``code``.

    Custom tables from the configuration take precedence over built-in
    ones. An unknown code falls back to the configured fallback language.
    """
    key = code.strip().lower()
    if key in config.custom_languages:
        return load_language_file(config.custom_languages[key])

    language = get_language(key)
    if language is not None:
        return language

    fallback = get_language(config.fallback_language) or GERMAN
    err_console.print(
        f"[yellow]Warning: Unknown language '{escape(code)}', defaulting to {fallback.name}[/yellow]",
        soft_wrap=True,
    )
    return fallback


def format_recurring(task: ParsedTask) -> str:
    if task.recurring is None:
        return NONE
    return f"{task.recurring.describe()} [dim]({task.recurring.to_rrule()})[/dim]"


def print_task(console: Console, task: ParsedTask, config: ConfigModel) -> None:
    """Print every parsed field and the annotation list."""
    def show_date(value, with_time: bool) -> str:
        if value is None:
            return NONE
        text = value.strftime(config.date_format)
        if with_time and task.time is not None:
            text += " " + task.time.strftime(config.time_format)
        return text

    deadline_time = task.time_target is TimeTarget.DEADLINE
    time_text = NONE
    if task.time is not None:
        time_text = f"{task.time.strftime(config.time_format)} [dim]({task.time_target.value})[/dim]"

    fields = [
        ("Title", f'"{escape(task.title)}"' if task.title else NONE),
        ("Scheduled Date", show_date(task.scheduled_date, not deadline_time)),
        ("Deadline", show_date(task.deadline, deadline_time)),
        ("Time", time_text),
        ("Priority", task.priority.name.lower() if task.priority else NONE),
        ("Project", f"@{escape(task.project)}" if task.project else NONE),
        ("Labels", ", ".join(f"#{escape(label)}" for label in task.labels) if task.labels else NONE),
        ("Recurring", format_recurring(task)),
    ]

    console.print(Panel.fit("Parsed Task", style="bold blue"))
    console.print("[bold]Original Input:[/bold]")
    console.print(f'  "{escape(task.original_input)}"', soft_wrap=True)
    console.print()
    console.print("[bold]Extracted Information:[/bold]")
    for name, value in fields:
        console.print(f"  {name + ':':<16}{value}", soft_wrap=True)
    console.print()

    console.print("[bold]Annotations:[/bold]")
    if not task.annotations:
        console.print(f"  {NONE}")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("Type", style="cyan")
    table.add_column("Range", justify="right")
    table.add_column("Text")
    for annotation in task.annotations:
        table.add_row(annotation.type.value, f"{annotation.start}-{annotation.end}",
                      escape(annotation.text))
    console.print(table)


@click.command(cls=ParseTaskCommand, epilog=EPILOG,
               context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("text", nargs=-1)
@click.option("--lang", "-l", "lang", metavar="CODE",
              help="Language: de, en, fr, es (default from config, de)")
@click.option("--date", "-d", "reference_date", type=click.DateTime(formats=["%Y-%m-%d"]),
              help="Reference date treated as today (YYYY-MM-DD)")
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False),
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, "--version", prog_name="parse-task")
def main(text, lang: Optional[str], reference_date, config_path: Optional[str], verbose: bool):
    """Parse natural language task TEXT and show the extracted fields."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(config_path)
    console = make_console(config)
    err_console = make_console(config, stderr=True)

    joined = " ".join(text)
    if not joined.strip():
        err_console.print("[red]Error: No input text provided[/red]")
        err_console.print("Try 'parse-task --help' for help.")
        sys.exit(1)

    try:
        language = resolve_language(lang or config.default_language, config, err_console)
    except LanguageConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)

    logger.debug(f"Parsing with language '{language.code}'")
    task = TaskParser(language).parse(joined, reference_date)
    print_task(console, task, config)


if __name__ == "__main__":
    main()
