"""Rendering of stepmatch command results.

Each command prints either rich text or, with ``--json``, exactly one JSON
document on stdout.
"""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import PotentialStep, WeightedCandidate

NO_MATCHES = "No matching steps"


def step_data(step: PotentialStep) -> dict[str, Any]:
    """JSON-ready description of a step definition."""
    return {
        "type": step.step_type.value if step.step_type else None,
        "pattern": step.pattern,
        "priority": step.priority,
        "handle": step.handle,
    }


@dataclass
class OutputContext:
    """Where and how command results are printed."""

    console: Console
    json_mode: bool = False

    def _dump(self, data: dict[str, Any]) -> None:
        print(json.dumps(data, indent=2, default=str))

    def result(self, data: dict[str, Any], message: str = "") -> None:
        """Print data in json mode, otherwise the rich-markup message."""
        if self.json_mode:
            self._dump(data)
        elif message:
            self.console.print(message)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print an error; message is plain text and never parsed as markup."""
        if self.json_mode:
            self._dump({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {escape(message)}[/red]")

    def candidates(self, line: str, candidates: list[WeightedCandidate]) -> None:
        """Print ranked candidates for line."""
        if self.json_mode:
            self._dump(
                {
                    "line": line,
                    "candidates": [
                        {"weight": c.weight, **step_data(c.step)} for c in candidates
                    ],
                }
            )
            return
        if not candidates:
            self.console.print(f"[yellow]{NO_MATCHES}[/yellow]")
            return

        table = Table(title=f"Candidates for: {escape(line)}")
        table.add_column("Weight", justify="right")
        table.add_column("Step")
        table.add_column("Priority", justify="right")
        for candidate in candidates:
            table.add_row(
                f"{candidate.weight:.2f}",
                escape(str(candidate.step)),
                str(candidate.step.priority),
            )
        self.console.print(table)

    def resolved(self, line: str, step: PotentialStep | None) -> None:
        """Print the step line resolves to, with its parameters and documentation."""
        if step is None:
            self.result({"line": line, "step": None}, f"[yellow]{NO_MATCHES}[/yellow]")
            return

        parameters = step.parameters(line) or {}
        documentation = step.documentation()
        if self.json_mode:
            self._dump(
                {
                    "line": line,
                    **step_data(step),
                    "parameters": parameters,
                    "documentation": documentation,
                }
            )
            return

        body = [f"[bold]{escape(str(step))}[/bold]", f"Priority: {step.priority}"]
        if step.handle:
            body.append(f"Handle: {escape(step.handle)}")
        for name, value in parameters.items():
            body.append(escape(f"  ${name} = {value}"))
        body.append("")
        body.append(escape(documentation))
        self.console.print(Panel("\n".join(body), title="Resolved step"))
