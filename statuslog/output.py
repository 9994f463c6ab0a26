"""statuslog - Report output"""

from typing import Dict, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


def _status_color(code: int) -> str:
    return 'green' if code < 400 else 'yellow' if code < 500 else 'red'


def _printable(value) -> str:
    # undecodable bytes are kept as surrogates by the reader; show them as \xNN
    return str(value).encode('utf-8', 'surrogateescape').decode('utf-8', 'backslashreplace')


def print_report(report: Dict, console: Optional[Console] = None):
    console = console or Console()
    summary = report['summary']

    skipped = summary['skipped_lines']
    console.print(Panel.fit(
        f"File: [cyan]{report['file']}[/]\n"
        f"Number of logs parsed: [cyan]{summary['total_entries']:,}[/]\n"
        f"Skipped lines: [{'yellow' if skipped else 'green'}]{skipped:,}[/]\n"
        f"Unique status codes: [cyan]{summary['unique_status_codes']:,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    first = report['first_entry']
    if first:
        console.print("\n[bold]First line[/]")
        table = Table(box=box.ROUNDED, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value", overflow="fold")
        for name, value in first.items():
            table.add_row(name, escape(_printable(value)))
        console.print(table)

    top = report['most_common']
    if top:
        color = _status_color(top['code'])
        console.print(f"\nMost common: [{color}]HTTP {top['code']}[/] ({top['count']} times)")

    if report['status_codes']:
        console.print("\n[bold]STATUS CODES[/]")
        table = Table(box=box.ROUNDED)
        table.add_column("Code")
        table.add_column("Count", justify="right")
        for item in reversed(report['status_codes']):
            color = _status_color(item['code'])
            table.add_row(f"[{color}]{item['code']}[/]", str(item['count']))
        console.print(table)
