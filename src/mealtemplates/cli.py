"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from mealtemplates.config import get_settings, reload_settings
from mealtemplates.data.foods import suggest_foods
from mealtemplates.errors import MealTemplateError, ValidationFailed
from mealtemplates.explore.macros import compute_daily_macros
from mealtemplates.export.assignment import build_catalog_entry, plan_assignment
from mealtemplates.export.formatters import format_template
from mealtemplates.export.payload import format_for_assignment
from mealtemplates.export.validation import validate_template
from mealtemplates.portions.scaling import resolve_portion_scale, scale_template
from mealtemplates.template.normalizer import normalize_template
from mealtemplates.template.serialization import (
    serialize_assignment_request,
    serialize_catalog_entry,
    serialize_template,
)

app = typer.Typer(
    help="Normalize, scale and assign meal-plan templates",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Show or create the settings file")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: Any, output: Optional[Path] = None) -> None:
    """Output JSON to stdout or a file."""
    json_str = json.dumps(response, indent=2)
    if output:
        output.write_text(json_str + "\n")
        console.print(f"[green]Wrote {output}[/green]")
    else:
        print(json_str)


def load_template_file(path: Path) -> tuple[Any, Optional[str]]:
    """Read a template JSON file.

    Catalog entries and assignment bodies (``mealPlanTemplate`` wrappers) are
    unwrapped. Returns the raw template and its name, if the file has one.
    """
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(1)

    if isinstance(data, dict) and "mealPlanTemplate" in data:
        name = data.get("name")
        return data["mealPlanTemplate"], name if isinstance(name, str) else None
    return data, None


def print_errors(errors: list[str]) -> None:
    for error in errors:
        console.print(f"[red]- {error}[/red]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config.yaml"),
) -> None:
    """Meal-plan template tools."""
    settings = reload_settings(config) if config else get_settings()
    level = logging.DEBUG if verbose else getattr(logging, settings.logging.level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# ============================================================================
# Template commands
# ============================================================================


@app.command()
def normalize(
    template_file: Path = typer.Argument(..., help="Raw template JSON"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here"),
) -> None:
    """Convert any historical template shape to the canonical form."""
    raw, _ = load_template_file(template_file)
    output_json(serialize_template(normalize_template(raw)), output)


@app.command()
def scale(
    template_file: Path = typer.Argument(..., help="Raw template JSON"),
    portion_scale: Optional[float] = typer.Option(
        None, "--scale", "-s", help="Portion scale (defaults to the configured scale)"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here"),
) -> None:
    """Normalize a template and compute scaled grams for every item."""
    raw, _ = load_template_file(template_file)
    if portion_scale is None:
        portion_scale = get_settings().scaling.default_portion_scale
    resolved = resolve_portion_scale(portion_scale)
    data = serialize_template(scale_template(normalize_template(raw), resolved))
    data["portionScale"] = resolved
    output_json(data, output)


@app.command()
def validate(
    template_file: Path = typer.Argument(..., help="Template JSON"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Run the pre-submission checks on a template."""
    raw, _ = load_template_file(template_file)
    errors = validate_template(raw)

    if json_output:
        output_json({"success": not errors, "command": "validate", "errors": errors})
    elif errors:
        console.print(f"[red]{len(errors)} problem(s) found:[/red]")
        print_errors(errors)
    else:
        console.print("[green]Template is valid[/green]")

    if errors:
        raise typer.Exit(1)


@app.command("format")
def format_cmd(
    template_file: Path = typer.Argument(..., help="Template JSON"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here"),
) -> None:
    """Print the cleaned payload that would be submitted."""
    raw, _ = load_template_file(template_file)
    output_json(format_for_assignment(raw), output)


@app.command()
def assign(
    template_file: Path = typer.Argument(..., help="Template JSON"),
    users: Optional[list[str]] = typer.Option(None, "--user", "-u", help="User ID to assign to"),
    meal_plan_type: Optional[str] = typer.Option(None, "--type", "-t", help="Meal plan type"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here"),
) -> None:
    """Build the bulk-assignment request body (nothing is sent)."""
    raw, _ = load_template_file(template_file)
    plan_type = meal_plan_type or get_settings().assignment.meal_plan_type
    try:
        request = plan_assignment(raw, users or [], plan_type)
    except ValidationFailed as e:
        console.print("[red]Cannot assign template:[/red]")
        print_errors(e.errors)
        raise typer.Exit(1)
    output_json(serialize_assignment_request(request), output)


@app.command()
def catalog(
    template_file: Path = typer.Argument(..., help="Template JSON"),
    name: str = typer.Argument(..., help="Catalog name"),
    meal_plan_type: Optional[str] = typer.Option(None, "--type", "-t", help="Meal plan type"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here"),
) -> None:
    """Build the body for saving a template to the catalog."""
    raw, _ = load_template_file(template_file)
    plan_type = meal_plan_type or get_settings().assignment.meal_plan_type
    try:
        entry = build_catalog_entry(name, raw, plan_type)
    except MealTemplateError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    output_json(serialize_catalog_entry(entry), output)


@app.command()
def preview(
    template_file: Path = typer.Argument(..., help="Template JSON"),
    portion_scale: Optional[float] = typer.Option(None, "--scale", "-s", help="Portion scale"),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: table, json, markdown"
    ),
) -> None:
    """Display a template, optionally with scaled grams."""
    raw, name = load_template_file(template_file)
    template = normalize_template(raw)
    resolved = None
    if portion_scale is not None:
        resolved = resolve_portion_scale(portion_scale)
        template = scale_template(template, resolved)

    try:
        rendered = format_template(
            template,
            output_format or get_settings().defaults.output_format,
            title=name,
            portion_scale=resolved,
            console=console,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    if rendered is not None:
        print(rendered)


@app.command()
def macros(
    template_file: Path = typer.Argument(..., help="Template JSON"),
    portion_scale: Optional[float] = typer.Option(None, "--scale", "-s", help="Portion scale"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Estimate daily protein, carbs and fats (first section of each family)."""
    raw, _ = load_template_file(template_file)
    template = normalize_template(raw)
    if portion_scale is not None:
        template = scale_template(template, portion_scale)
    totals = compute_daily_macros(template)

    if json_output:
        output_json(
            {
                "proteins": totals.proteins,
                "carbs": totals.carbs,
                "fats": totals.fats,
                "allZero": totals.all_zero,
            }
        )
        return

    table = Table(title="Daily Macros")
    table.add_column("Macro")
    table.add_column("Grams", justify="right")
    table.add_row("Protein", f"{totals.proteins:.2f}")
    table.add_row("Carbs", f"{totals.carbs:.2f}")
    table.add_row("Fats", f"{totals.fats:.2f}")
    console.print(table)
    if totals.all_zero:
        console.print("[yellow]No known foods with grams; totals are zero.[/yellow]")


@app.command()
def suggest(query: str = typer.Argument(..., help="Food name fragment")) -> None:
    """List food suggestions with their usual portion."""
    matches = suggest_foods(query)
    if not matches:
        console.print(f"[yellow]No suggestions for '{query}'[/yellow]")
        return
    table = Table(title="Suggestions")
    table.add_column("Food", style="cyan")
    table.add_column("Grams", justify="right")
    for suggestion in matches:
        table.add_row(suggestion.name, str(suggestion.grams))
    console.print(table)


# ============================================================================
# Config commands
# ============================================================================


@config_app.command("show")
def config_show() -> None:
    """Print the effective settings."""
    output_json(get_settings().to_dict())


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Where to write config.yaml"),
) -> None:
    """Write the current settings to config.yaml."""
    written = get_settings().save(path)
    console.print(f"[green]Settings written to {written}[/green]")


if __name__ == "__main__":
    app()
