"""Preview formatters for templates and scaled plans."""

from __future__ import annotations

import json
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mealtemplates.portions.scaling import total_grams
from mealtemplates.template.models import CATEGORY_KEYS, Family, Section, Template
from mealtemplates.template.serialization import serialize_template


def _grams_text(value) -> str:
    return "-" if value in ("", None) else f"{value}g"


class TableFormatter:
    """Format templates as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(
        self,
        template: Template,
        title: Optional[str] = None,
        portion_scale: Optional[float] = None,
    ) -> None:
        """Print one table per section.

        Args:
            template: Template to display
            title: Optional heading (template name)
            portion_scale: Scale the grams were computed with, if any
        """
        header_lines = [f"[bold]{title or 'MEAL PLAN TEMPLATE'}[/bold]"]
        if portion_scale is not None:
            header_lines.append(f"Portion scale: {portion_scale:g}x")
        self.console.print(Panel("\n".join(header_lines), title="Meal Plan"))

        for family, index, section in template.iter_sections():
            self.console.print(self._section_table(family, index, section, portion_scale))

    def _section_table(
        self,
        family: Family,
        index: int,
        section: Section,
        portion_scale: Optional[float],
    ) -> Table:
        heading = section.title or f"[dim]{family.default_title(index)} (untitled)[/dim]"
        table = Table(title=heading)
        table.add_column("Category", style="magenta")
        table.add_column("Food", style="cyan", max_width=40)
        table.add_column("Base", justify="right")
        if portion_scale is not None:
            table.add_column("Grams", justify="right", style="green")

        for key in CATEGORY_KEYS:
            for item in section.categories.get(key, []):
                if item.is_blank:
                    continue
                row = [key, item.name, _grams_text(item.base_grams)]
                if portion_scale is not None:
                    row.append(_grams_text(item.grams))
                table.add_row(*row)

        if portion_scale is not None:
            table.add_row(
                "[bold]TOTAL[/bold]", "", "", f"[bold]{total_grams(section.items)}g[/bold]"
            )
        return table


class JSONFormatter:
    """Format templates as JSON for programmatic use."""

    def format(self, template: Template, portion_scale: Optional[float] = None) -> str:
        data = serialize_template(template)
        if portion_scale is not None:
            data["portionScale"] = portion_scale
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format templates as Markdown for sharing with clients."""

    def format(
        self,
        template: Template,
        title: Optional[str] = None,
        portion_scale: Optional[float] = None,
    ) -> str:
        lines = [f"# {title or 'Meal Plan Template'}", ""]
        if portion_scale is not None:
            lines.extend([f"**Portion scale:** {portion_scale:g}x", ""])

        for family in Family:
            lines.extend([f"## {family.value.capitalize()}", ""])
            for index, section in enumerate(template.sections(family)):
                lines.extend([f"### {section.title or family.default_title(index)}", ""])
                if portion_scale is not None:
                    lines.extend(["| Category | Food | Base | Grams |", "|---|---|---|---|"])
                else:
                    lines.extend(["| Category | Food | Base |", "|---|---|---|"])
                for key in CATEGORY_KEYS:
                    for item in section.categories.get(key, []):
                        if item.is_blank:
                            continue
                        row = f"| {key} | {item.name} | {_grams_text(item.base_grams)} |"
                        if portion_scale is not None:
                            row += f" {_grams_text(item.grams)} |"
                        lines.append(row)
                lines.append("")

        return "\n".join(lines)


def format_template(
    template: Template,
    output_format: str = "table",
    title: Optional[str] = None,
    portion_scale: Optional[float] = None,
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format a template in the specified format.

    Args:
        template: Template to format
        output_format: One of 'table', 'json', 'markdown'
        title: Optional heading
        portion_scale: Scale used for ``grams``, shown when given
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        TableFormatter(console).format(template, title, portion_scale)
        return None
    elif output_format == "json":
        return JSONFormatter().format(template, portion_scale)
    elif output_format == "markdown":
        return MarkdownFormatter().format(template, title, portion_scale)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
