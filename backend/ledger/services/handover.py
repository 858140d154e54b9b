# backend/ledger/services/handover.py
"""
Handover document rendering.

Turns a fully loaded project into one self-contained HTML page for the
client. Rendering is pure: the same input and the same ``generated_at``
always give byte-identical output.
"""

import math
import re
from datetime import datetime
from typing import Any, Iterable, Optional

from jinja2 import BaseLoader, Environment, StrictUndefined

OVERVIEW_PLACEHOLDER = "No overview provided."
REQUIREMENTS_PLACEHOLDER = "No requirements provided."

HANDOVER_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{{ project_name }} - Project Handover</title>
<style>
  body { font-family: 'Helvetica Neue', Helvetica, Arial, sans-serif; line-height: 1.6; color: #1a1a1a; max-width: 800px; margin: 40px auto; padding: 20px; }
  h1 { font-size: 48px; font-weight: 900; text-transform: uppercase; letter-spacing: -2px; border-bottom: 4px solid black; padding-bottom: 10px; }
  h2 { font-size: 24px; font-weight: 800; text-transform: uppercase; margin-top: 40px; border-top: 1px solid #eee; padding-top: 20px; }
  .meta { color: #888; font-size: 12px; text-transform: uppercase; letter-spacing: 1px; }
  .section { margin-bottom: 40px; }
  table { width: 100%; border-collapse: collapse; margin: 20px 0; }
  th, td { border-bottom: 1px solid #eee; padding: 12px; text-align: left; }
  th { font-size: 10px; text-transform: uppercase; color: #888; }
  .todo-item { display: flex; align-items: center; gap: 10px; margin-bottom: 5px; }
  .todo-done { text-decoration: line-through; color: #888; }
  .total { font-weight: bold; text-align: right; }
  pre { background: #f5f5f5; padding: 20px; white-space: pre-wrap; font-family: monospace; font-size: 14px; }
</style>
</head>
<body>
<div class="meta">Project Handover Document // {{ generated_on }}</div>
<h1>{{ project_name }}</h1>
<div class="meta">Client: {{ client_name }}</div>

<div class="section">
<h2>Overview</h2>
<pre>{{ overview }}</pre>
</div>

<div class="section">
<h2>Requirements</h2>
<pre>{{ requirements }}</pre>
</div>

<div class="section">
<h2>Task Ledger</h2>
{% for todo in todos %}
<div class="todo-item{% if todo.done %} todo-done{% endif %}">[{{ 'X' if todo.done else ' ' }}] {{ todo.task }}</div>
{% endfor %}
</div>

<div class="section">
<h2>Hours Log</h2>
<table>
<thead><tr><th>Date</th><th>Duration</th><th>Description</th></tr></thead>
<tbody>
{% for entry in hours %}
<tr><td>{{ entry.date }}</td><td>{{ entry.duration | hours }}h</td><td>{{ entry.description }}</td></tr>
{% endfor %}
</tbody>
</table>
<div class="total">Total: {{ total_hours | hours }}h</div>
</div>

<div class="section">
<h2>Billing &amp; Scope</h2>
<pre>{{ billing }}</pre>
<pre>{{ scope }}</pre>
</div>
</body>
</html>
"""


def format_hours(value: float) -> str:
    """Full precision, whole numbers without a fraction: 2 -> '2', 0.125 -> '0.125'"""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _text(value: Optional[Any]) -> str:
    return "" if value is None else str(value)


def _field(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def handover_filename(project_name: str) -> str:
    """Suggested download name, e.g. 'Redesign 2026' -> 'redesign_2026_handover.html'"""
    slug = re.sub(r"[^a-z0-9_-]+", "_", (project_name or "").lower()).strip("_")
    return f"{slug or 'project'}_handover.html"


class HandoverExporter:
    """Renders project data into the client handover document"""

    def __init__(self):
        self.jinja_env = Environment(
            loader=BaseLoader(),
            autoescape=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["hours"] = format_hours
        self.template = self.jinja_env.from_string(HANDOVER_TEMPLATE)

    @staticmethod
    def section_content(sections: Iterable[Any], section_type: str) -> str:
        for section in sections:
            if _field(section, "section_type") == section_type:
                return _text(_field(section, "content"))
        return ""

    def render(
        self,
        project: Any,
        sections: Iterable[Any],
        todos: Iterable[Any],
        hours: Iterable[Any],
        generated_at: Optional[datetime] = None,
    ) -> str:
        sections = list(sections)
        hours = [
            {
                "date": _text(_field(entry, "date")),
                "duration": float(_field(entry, "duration") or 0),
                "description": _text(_field(entry, "description")),
            }
            for entry in hours
        ]
        todos = [
            {
                "task": _text(_field(todo, "task")),
                "done": _field(todo, "status") == "completed",
            }
            for todo in todos
        ]
        generated_at = generated_at or datetime.now()

        return self.template.render(
            project_name=_text(_field(project, "name")),
            client_name=_text(_field(project, "client_name")),
            generated_on=generated_at.date().isoformat(),
            overview=self.section_content(sections, "overview") or OVERVIEW_PLACEHOLDER,
            requirements=self.section_content(sections, "requirements") or REQUIREMENTS_PLACEHOLDER,
            todos=todos,
            hours=hours,
            total_hours=math.fsum(entry["duration"] for entry in hours),
            billing=self.section_content(sections, "billing"),
            scope=self.section_content(sections, "scope"),
        )


handover_exporter = HandoverExporter()
