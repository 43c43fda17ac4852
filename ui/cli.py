"""Command Line Interface (CLI) for user interaction."""

from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt

from core.reports import ReportKind
from utils.logger import get_logger

logger = get_logger()
console = Console()

REPORT_CHOICES = [str(kind.value) for kind in ReportKind]


def display_welcome():
    """Displays a welcome message."""
    console.print(Panel(
        "[bold green]Assessment Reporting System[/bold green]",
        title="Welcome",
        border_style="blue"
    ))
    console.print("Generates diagnostic, progress and feedback reports from assessment data.")
    console.rule()

def display_error(message: str):
    """Displays an error message in a standard format."""
    console.print(Panel(f"[bold red]Error:[/bold red] {message}", title="Error", border_style="red"))

def display_warning(message: str):
    """Displays a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {message}")

def display_success(message: str):
    """Displays a success message."""
    console.print(f"[green]Success:[/green] {message}")

def display_report(report: str):
    """Prints a generated report under a REPORT OUTPUT banner."""
    console.print()
    console.rule("REPORT OUTPUT")
    # Report text is printed verbatim: no markup, highlighting or wrapping
    console.print(report, markup=False, highlight=False, soft_wrap=True)

def prompt_student_id() -> str:
    """Asks for the id of the student to report on."""
    student_id = Prompt.ask("Student ID").strip()
    logger.info(f"User entered student ID: {student_id}")
    return student_id

def prompt_report_type() -> int:
    """Asks which report to generate and returns its number."""
    report_type = IntPrompt.ask(
        "Report to generate (1 for Diagnostic, 2 for Progress, 3 for Feedback)",
        choices=REPORT_CHOICES,
    )
    logger.info(f"User selected report type: {report_type}")
    return report_type
