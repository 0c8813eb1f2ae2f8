# src/ember/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import config as ember_config
from ..ember_token import EOF
from ..environment import Environment
from ..evaluator import evaluate, EVAL_SUMMARY
from ..evaluator.utils import is_error, reset_summary
from ..lexer import Lexer
from ..object import NULL
from ..parser import Parser

console = Console()
err_console = Console(stderr=True)

PROMPT = ">> "


def _configure_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_source(file):
    """Read a source file; unreadable or non-UTF-8 files end the command with status 1."""
    try:
        with open(file, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


def _parse(source, filename="<stdin>"):
    parser = Parser(Lexer(source, filename))
    program = parser.parse_program()
    return program, parser.errors


def _print_parse_errors(errors, title="Parser Errors:"):
    console.print(f"[bold red]{title}[/bold red]")
    for error in errors:
        console.print(f"  ❌ {escape(error)}")


def _print_result(result):
    if is_error(result):
        console.print(f"[bold red]{escape(result.inspect())}[/bold red]")
    elif result is not None and result is not NULL:
        console.print(escape(result.inspect()))


def _print_summary():
    table = Table(title="Evaluation Summary")
    table.add_column("Counter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    for key, value in EVAL_SUMMARY.items():
        table.add_row(key, str(value))
    console.print(table)


@click.group()
@click.version_option(version=__version__, prog_name="Ember")
@click.option('--debug', is_flag=True, help="Log evaluator internals to stderr.")
def cli(debug):
    """Ember - a small tree-walking interpreter"""
    if debug:
        ember_config.debug_level = "debug"
    _configure_logging(ember_config.enable_debug_logs)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--stats', is_flag=True, help="Print evaluation counters afterwards.")
def run(file, stats):
    """Run an Ember program"""
    program, errors = _parse(_read_source(file), file)
    if errors:
        _print_parse_errors(errors)
        sys.exit(1)

    reset_summary()
    result = evaluate(program, Environment())
    _print_result(result)

    if stats:
        _print_summary()
    if is_error(result):
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check syntax of an Ember file"""
    _, errors = _parse(_read_source(file), file)
    if errors:
        _print_parse_errors(errors, title="❌ Syntax Errors Found:")
        sys.exit(1)
    console.print("[bold green]✅ Syntax is valid![/bold green]")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show the AST of an Ember file"""
    program, errors = _parse(_read_source(file), file)
    if errors:
        _print_parse_errors(errors)
        sys.exit(1)

    lines = [escape(repr(stmt)) for stmt in program.statements]
    console.print(Panel.fit(
        "\n".join(lines) or "(empty program)",
        title=f"[bold blue]{escape(repr(program))}[/bold blue]",
        border_style="blue"
    ))


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of an Ember file"""
    lexer = Lexer(_read_source(file), file)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in lexer.tokens():
        if token.type == EOF:
            break
        table.add_row(token.type, escape(token.literal), str(token.line), str(token.column))

    console.print(table)


@cli.command()
def repl():
    """Start the Ember REPL"""
    env = Environment()
    console.print(f"[bold green]Ember REPL v{__version__}[/bold green]")
    console.print("Type 'exit' to quit\n")

    while True:
        try:
            code = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print("\n👋 Goodbye!")
            break

        if code.strip() in ('exit', 'quit'):
            break
        if not code.strip():
            continue

        program, errors = _parse(code)
        if errors:
            for error in errors:
                console.print(f"[red]Error: {escape(error)}[/red]")
            continue

        _print_result(evaluate(program, env))


@cli.command(name="config")
@click.option('--debug-level', type=click.Choice(["none", "minimal", "debug"]), default=None)
@click.option('--max-depth', type=click.IntRange(min=100), default=None)
@click.option('--save', is_flag=True, help="Write settings to the config file.")
def config_cmd(debug_level, max_depth, save):
    """Show or change persistent settings"""
    if debug_level is not None:
        ember_config.debug_level = debug_level
    if max_depth is not None:
        ember_config.max_depth = max_depth
    if save:
        ember_config.save()

    table = Table(title=f"Config ({escape(str(ember_config.path))})")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for key, value in ember_config.as_dict().items():
        table.add_row(key, str(value))
    console.print(table)


if __name__ == "__main__":
    cli()
