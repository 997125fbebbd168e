#!/usr/bin/env python3
"""Project Estimator CLI - price a software project from the pricing menu.

Usage:
    # Show the menu of project types, features and multiplier options
    python main.py --list-options

    # Estimate a web app with authentication and two extra bundles
    python main.py -t web_app -f authentication -b 2 \\
        --complexity medium --risk low --speed normal --discovery no --support no

    # Machine-readable output
    python main.py -t api --complexity high --risk medium --speed fast \\
        --discovery light --support standard --json
"""

import sys
import json
from typing import Any, Dict, Mapping, Optional, Tuple

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.markup import escape

from contracts import EstimateResult, MultiplierCategory
from orchestrator import PricingEngine
from pricing import ConfigurationError
from utils import setup_logging
from config import settings, load_pricing_config


console = Console()


def format_money(value: float) -> str:
    """Format a money value with the configured currency symbol."""
    return f"{settings.currency_symbol}{value:,.0f}"


def format_label(key: str) -> str:
    """Turn an option key into a title: very_high -> Very High."""
    return key.replace("_", " ").title()


def format_option(key: str, factor: float) -> str:
    """Option label with its uplift, e.g. Complex (+30%)."""
    uplift = round(factor * 100 - 100, 1)
    return f"{format_label(key)} ({uplift:+g}%)"


def print_options(config: Mapping[str, Any]) -> None:
    """Print the pricing menu."""
    types = Table(title="Project types", title_justify="left")
    types.add_column("Key", style="cyan")
    types.add_column("Title")
    types.add_column("Days", justify="right")
    for key, item in config["project_types"].items():
        types.add_row(key, item.get("title", format_label(key)), f"{item['days']:g}")
    console.print(types)

    features = Table(title="Features", title_justify="left")
    features.add_column("Key", style="cyan")
    features.add_column("Title")
    features.add_column("Days", justify="right")
    for key, item in config["features"].items():
        features.add_row(key, item.get("title", format_label(key)), f"{item['days']:g}")
    console.print(features)

    multipliers = Table(title="Multipliers", title_justify="left")
    multipliers.add_column("Option", style="cyan")
    multipliers.add_column("Values")
    for category in MultiplierCategory:
        options = config["multipliers"].get(category.value)
        if not options:
            continue
        name = f"--{category.request_field.replace('realTime', 'real-time')}"
        if not category.is_required:
            name += " [dim](optional)[/dim]"
        multipliers.add_row(name, ", ".join(f"{k}: {format_option(k, v)}" for k, v in options.items()))
    console.print(multipliers)

    bundles = config.get("bundles") or {}
    console.print(
        f"\n[dim]Bundles:[/dim] up to {bundles.get('max_quantity', settings.max_bundle_quantity)}, "
        f"{bundles.get('days_per_bundle', settings.default_days_per_bundle):g} days each"
    )


def print_estimate(result: EstimateResult, warnings: list) -> None:
    """Print an estimate as rich tables."""
    console.print(Panel.fit(
        f"[bold]{result.days:g} days[/bold]\n"
        f"{format_money(result.low)} - {format_money(result.high)}",
        title="Estimate",
        border_style="blue",
    ))

    phases = Table(title="Phases", title_justify="left")
    phases.add_column("Phase")
    phases.add_column("Share", justify="right")
    phases.add_column("Low", justify="right")
    phases.add_column("High", justify="right")
    for name, phase in result.phases.items():
        phases.add_row(format_label(name), f"{phase.percentage:.1%}", format_money(phase.low), format_money(phase.high))
    console.print(phases)

    payments = Table(title="Payment schedule", title_justify="left")
    payments.add_column("Milestone")
    payments.add_column("Low", justify="right")
    payments.add_column("High", justify="right")
    for payment in result.payment_schedule:
        payments.add_row(payment.label, format_money(payment.low), format_money(payment.high))
    console.print(payments)

    console.print(f"\n[green]Monthly support:[/green] {format_money(result.support)}")

    if warnings:
        console.print(f"\n[yellow]Warnings ({len(warnings)}):[/yellow]")
        for warning in warnings:
            console.print(f"  - {escape(warning)}")


def fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


@click.command()
@click.option(
    "--config", "-c", "config_path",
    default=None,
    help=f"Pricing configuration JSON (default: {settings.pricing_config_path})"
)
@click.option("--project-type", "-t", help="Project type key")
@click.option("--feature", "-f", "features", multiple=True, help="Feature key (repeatable)")
@click.option("--bundles", "-b", type=int, default=0, help="Number of extra bundles (default: 0)")
@click.option("--complexity", help="Complexity option")
@click.option("--risk", help="Risk option")
@click.option("--speed", help="Delivery speed option")
@click.option("--discovery", help="Discovery option")
@click.option("--support", help="Support option")
@click.option("--compliance", default=None, help="Compliance option (if configured)")
@click.option("--real-time", "real_time", default=None, help="Real-time option (if configured)")
@click.option(
    "--list-options",
    is_flag=True,
    help="List project types, features and multiplier options and exit"
)
@click.option("--json", "as_json", is_flag=True, help="Print the estimate as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(
    config_path: Optional[str],
    project_type: Optional[str],
    features: Tuple[str, ...],
    bundles: int,
    complexity: Optional[str],
    risk: Optional[str],
    speed: Optional[str],
    discovery: Optional[str],
    support: Optional[str],
    compliance: Optional[str],
    real_time: Optional[str],
    list_options: bool,
    as_json: bool,
    verbose: bool,
):
    """Project Estimator: cost and time estimates for software projects.

    Prices a project from its type, features, bundles and multiplier options,
    and breaks the estimate down into phases, payments and monthly support.
    """
    setup_logging("DEBUG" if verbose else settings.log_level)

    try:
        config = load_pricing_config(config_path)
        engine = PricingEngine(config)
    except FileNotFoundError as e:
        fail(str(e))
    except json.JSONDecodeError as e:
        fail(f"Pricing configuration is not valid JSON: {e}")
    except ConfigurationError as e:
        fail(f"Invalid pricing configuration: {e}")

    if list_options:
        print_options(engine.config)
        return

    request: Dict[str, Any] = {
        "projectType": project_type,
        "features": list(features),
        "bundles": bundles,
        "complexity": complexity,
        "risk": risk,
        "speed": speed,
        "discovery": discovery,
        "support": support,
        "compliance": compliance,
        "realTime": real_time,
    }

    try:
        result, warnings = engine.estimate_with_warnings(request)
    except ConfigurationError as e:
        fail(str(e))

    if as_json:
        click.echo(json.dumps(
            {"estimate": result.model_dump(by_alias=True), "warnings": warnings},
            indent=2,
        ))
        return

    print_estimate(result, warnings)


if __name__ == "__main__":
    main()
