from rich.console import Console
from rich.markup import escape
from rich.table import Table
import os

# Token listings go to stdout, everything else to stderr
console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def _is_minimal() -> bool:
    env = os.environ.get('TINYC_MINIMAL_UI')
    if env is None:
        return False
    return env.strip().lower() in ('1', 'true', 'yes', 'on')


def print_stage(step: int, total: int, message: str):
    """Print a staged progress-like line (e.g. [1/2] Lexing...)"""
    if _is_minimal():
        err_console.print(f"[{step}/{total}] {message}", markup=False)
    else:
        err_console.print(f"[cyan]●[/cyan] [bold]{step}/{total}[/bold] {escape(message)}")


def print_info(message: str):
    if _is_minimal():
        return
    err_console.print(f"[yellow]Info:[/yellow] {escape(message)}")


def print_error(message: str):
    if _is_minimal():
        err_console.print(f"[ERROR] {message}", markup=False)
        return
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def print_warning(message: str):
    if _is_minimal():
        err_console.print(f"[WARN] {message}", markup=False)
        return
    err_console.print(f"[#9b59b6]Warning:[/#9b59b6] {escape(message)}")


def print_success(message: str):
    if _is_minimal():
        err_console.print(f"[OK] {message}", markup=False)
        return
    err_console.print(f"[green]Success:[/green] {escape(message)}")


def print_token_table(tokens, title: str = "Tokens"):
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Line", justify="right")
    table.add_column("Pos", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Text")
    table.add_column("Value", style="green")

    for index, token in enumerate(tokens):
        value = "" if token.value is None else str(getattr(token.value, 'name', token.value))
        table.add_row(str(index), str(token.line), str(token.position),
                      token.type.name, escape(token.text), escape(value))

    console.print(table)
