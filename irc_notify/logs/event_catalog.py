"""Human-readable text for logged events.

Templates live in ``event_templates.json`` next to this module, grouped by
domain then action. Each one is a ``str.format`` pattern over the keyword
fields of the event it describes.
"""

from __future__ import annotations

import json
import string
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")

_FORMATTER = string.Formatter()


def placeholders(template: str) -> frozenset[str] | None:
    """Field names a template refers to, or None when its braces are malformed."""
    try:
        return frozenset(name for _, name, _, _ in _FORMATTER.parse(template) if name)
    except ValueError:
        return None


def _iter_templates(raw: Any) -> Iterator[tuple[tuple[str, str], str]]:
    if not isinstance(raw, Mapping):
        return
    for domain, actions in raw.items():
        if not isinstance(actions, Mapping):
            continue
        for action, template in actions.items():
            if isinstance(template, str) and placeholders(template) is not None:
                yield (str(domain), str(action)), template


@dataclass(frozen=True)
class EventCatalog:
    """Immutable (domain, action) -> template table."""

    templates: Mapping[tuple[str, str], str] = field(default_factory=dict)
    load_error: str | None = None

    @classmethod
    def from_file(cls, path: Path = TEMPLATES_PATH) -> EventCatalog:
        """Read a catalog; an unreadable file yields an empty one with ``load_error`` set."""
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return cls(load_error=f"Event templates file missing: {path}")
        except (OSError, ValueError) as e:
            return cls(load_error=f"Failed to load event templates: {e}"[:200])
        return cls(templates=dict(_iter_templates(raw)))

    def render(self, domain: str, action: str, fields: Mapping[str, object]) -> tuple[str, bool]:
        """Return the event text and whether it was derived from the event name.

        A template whose fields are not all supplied is returned unformatted.
        """
        template = self.templates.get((domain, action))
        if template is None:
            return f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}", True
        names = placeholders(template) or frozenset()
        if not names <= fields.keys():
            return template, False
        try:
            return template.format(**fields), False
        except ValueError:
            # bad format spec for the supplied value
            return template, False


catalog = EventCatalog.from_file()

__all__ = ["EventCatalog", "TEMPLATES_PATH", "catalog", "placeholders"]
