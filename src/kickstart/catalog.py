"""Built-in catalog of official templates.

Official templates ship inside the package under ``kickstart/templates``.
Their locations carry a placeholder that is replaced with the installed
template root when the template is materialized.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

PLACEHOLDER = "{{ templatePath }}"

TEMPLATE_ROOT = Path(__file__).resolve().parent / "templates"


@dataclass(frozen=True)
class TemplateDescriptor:
    """A template name and where to fetch it from.

    ``location`` is either a local path pattern containing PLACEHOLDER
    or a remote git URL.
    """
    name: str
    location: str


# Template registry (order is the display order)
TEMPLATES = {
    "hello-world": f"{PLACEHOLDER}/hello-world",
    "web-app": f"{PLACEHOLDER}/web-app",
    "api-service": f"{PLACEHOLDER}/api-service",
}


def list_official() -> List[TemplateDescriptor]:
    """Get the official templates in catalog order."""
    return [TemplateDescriptor(name, location) for name, location in TEMPLATES.items()]


def get_official(name: str) -> Optional[TemplateDescriptor]:
    """Look up an official template by name."""
    location = TEMPLATES.get(name)
    if location is None:
        return None
    return TemplateDescriptor(name, location)
