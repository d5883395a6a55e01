"""Rich-based rendering of validation outcomes.

Provides a console observer that reports rejected equipment and warnings
raised on stored equipment, plus a helper that renders one result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from equipment_tracker.events import (
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)

if TYPE_CHECKING:
    from equipment_tracker.results import ValidationResult

__all__ = ["ConsoleReportObserver", "render_validation_result"]


def _result_text(result: ValidationResult) -> Text:
    text = Text()
    if result.errors:
        text.append("Errors:\n", style="bold red")
        for error in result.errors:
            text.append(f"  - {error}\n", style="red")
    if result.warnings:
        text.append("Warnings:\n", style="bold yellow")
        for warning in result.warnings:
            text.append(f"  - {warning}\n", style="yellow")
    if not result.errors and not result.warnings:
        text.append("No issues found.", style="green")
    text.rstrip()
    return text


def render_validation_result(
    result: ValidationResult,
    console: Console | None = None,
    title: str = "Validation",
) -> None:
    """Print a validation result as a Rich panel.

    Args:
        result: The result to render.
        console: Console to print to. If None, creates a new one.
        title: Panel title.
    """
    console = console or Console()
    border = "red" if not result.is_valid else "yellow" if result.has_warnings else "green"
    console.print(Panel(_result_text(result), title=f"[bold]{title}[/]", border_style=border))


class ConsoleReportObserver(ValidationObserver):
    """Report repository outcomes on a Rich console.

    Prints a panel for every rejected record, and for stored records whose
    validation produced warnings. Keeps running counts of both outcomes.

    Example:
        repository.add_observer(ConsoleReportObserver())
        repository.add(equipment)  # rejection details printed
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
        """
        self._console = console or Console()
        self.stored = 0
        self.rejected = 0

    def on_event(self, event: ValidationEvent) -> None:
        """Handle repository events.

        Args:
            event: The event to handle.
        """
        if event.event_type == ValidationEventType.EQUIPMENT_REJECTED:
            self.rejected += 1
            equipment = event.data["equipment"]
            render_validation_result(
                event.data["result"],
                self._console,
                title=f"Rejected: {equipment.name or '(unnamed)'}",
            )

        elif event.event_type == ValidationEventType.EQUIPMENT_ADDED:
            self.stored += 1
            result = event.data.get("result")
            if result is not None and result.has_warnings:
                equipment = event.data["equipment"]
                render_validation_result(
                    result,
                    self._console,
                    title=f"Stored #{equipment.id} with warnings",
                )

        elif event.event_type == ValidationEventType.STRATEGY_FAILED:
            self._console.print(
                f"[bold red]Strategy '{event.data['strategy_name']}' failed:[/] "
                f"{event.data['exception']}",
                markup=True,
                highlight=False,
            )
