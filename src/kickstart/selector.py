"""Interactive template selection.

The candidate list is built once per run (official templates first,
then registry results) and filtered in memory as the user types.
"""

from dataclasses import dataclass
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from kickstart.catalog import TemplateDescriptor, list_official
from kickstart.registry import RegistryClient

OFFICIAL_TAG = "Official"

# Forces an answer to be read as filter text, even when it is all digits
FILTER_PREFIX = "/"


@dataclass(frozen=True)
class Candidate:
    """A selectable entry in the template list."""
    descriptor: TemplateDescriptor
    tag: str

    @property
    def display_name(self) -> str:
        return f"{self.descriptor.name} {self.tag}"


def official_candidate(descriptor: TemplateDescriptor) -> Candidate:
    return Candidate(descriptor, OFFICIAL_TAG)


def third_party_candidate(descriptor: TemplateDescriptor, stars: int) -> Candidate:
    return Candidate(descriptor, f"{stars}⭑")


def filter_candidates(candidates: List[Candidate], text: str) -> List[Candidate]:
    """Case-insensitive substring match on display names.

    An empty filter returns every candidate.
    """
    if not text:
        return list(candidates)
    needle = text.lower()
    return [c for c in candidates if needle in c.display_name.lower()]


class TemplateSelector:
    """Builds the candidate list and lets the user pick a template."""

    def __init__(self, registry: Optional[RegistryClient] = None, console: Optional[Console] = None):
        self.registry = registry or RegistryClient()
        self.console = console or Console()
        self._candidates: Optional[List[Candidate]] = None

    def load(self) -> List[Candidate]:
        """Build the candidate list on first call, then reuse it."""
        if self._candidates is None:
            official = [official_candidate(d) for d in list_official()]
            with self.console.status("loading..."):
                found = self.registry.search()
            third_party = [third_party_candidate(t.descriptor, t.stars) for t in found]
            self._candidates = official + third_party
        return self._candidates

    def filter(self, text: str) -> List[Candidate]:
        return filter_candidates(self.load(), text)

    def select(self) -> TemplateDescriptor:
        """Prompt until the user picks a template.

        Typing a number picks from the list shown; anything else narrows
        the list. A leading "/" always filters, so "/2" matches names
        containing "2". An empty answer clears the filter.

        Raises:
            click.Abort: If the user cancels the prompt
        """
        query = ""
        while True:
            matches = self.filter(query)
            if not matches:
                self.console.print(f"[yellow]No templates match[/] '{query}'")
                query = click.prompt("Filter", default="", show_default=False).strip()
                continue

            self._show(matches)
            answer = click.prompt(
                "Select a template to init (number, or text or /text to filter)",
                default="",
                show_default=False,
            ).strip()
            if answer.isdigit() and 1 <= int(answer) <= len(matches):
                return matches[int(answer) - 1].descriptor
            if answer.isdigit():
                self.console.print(f"[yellow]Choose a number between 1 and {len(matches)}[/]")
                continue
            query = answer[1:] if answer.startswith(FILTER_PREFIX) else answer

    def _show(self, candidates: List[Candidate]) -> None:
        table = Table(show_header=False, box=None)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Template", style="cyan")
        table.add_column("Source", style="italic dim")
        for i, candidate in enumerate(candidates, 1):
            table.add_row(str(i), candidate.descriptor.name, candidate.tag)
        self.console.print(table)
