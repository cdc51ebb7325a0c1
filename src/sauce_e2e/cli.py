"""CLI entry point for the Sauce Demo E2E suite."""

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .browser import BrowserSession
from .config import Config, load_config
from .errors import E2EError
from .flow import PurchaseFlow
from .models import FlowResult, StepStatus
from .test_data import TestDataProvider

console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@click.group()
@click.version_option()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Sauce Demo E2E - scripted purchase flow against saucedemo.com."""
    ctx.ensure_object(dict)
    _setup_logging(verbose)
    ctx.obj["config"] = load_config(Path(config_path) if config_path else None)


@main.command()
@click.option("--headed", is_flag=True, help="Show the browser window")
@click.option("--count", "-n", type=int, default=None, help="Number of products to buy")
@click.option("--screenshot", "screenshot_path", type=click.Path(), default=None, help="Confirmation screenshot path")
@click.pass_context
def run(ctx: click.Context, headed: bool, count: int | None, screenshot_path: str | None) -> None:
    """Run the purchase flow once in a real browser."""
    config: Config = ctx.obj["config"]
    if headed:
        config = config.model_copy(
            update={"browser": config.browser.model_copy(update={"headless": False})}
        )

    console.print(f"\n[bold blue]🛒 Purchase flow:[/] {config.base_url}\n")

    test_data = TestDataProvider(config.test_data_path)
    result, error = asyncio.run(
        _run_flow(config, test_data, count, Path(screenshot_path) if screenshot_path else None)
    )

    _print_steps(result)

    if error is not None:
        console.print(Panel(str(error), title="[bold red]✗ Flow failed[/]", border_style="red"))
        sys.exit(1)

    console.print("[bold green]✓ All verifications passed![/]")
    if result.screenshot_path:
        console.print(f"[dim]Screenshot: {result.screenshot_path}[/]\n")


async def _run_flow(
    config: Config,
    test_data: TestDataProvider,
    count: int | None,
    screenshot_path: Path | None,
) -> tuple[FlowResult, E2EError | None]:
    """Run the flow, returning the partial result alongside any suite error."""
    async with BrowserSession(config) as session:
        handle = await session.new_handle()
        flow = PurchaseFlow(handle, config, test_data)
        try:
            return await flow.run(products_to_buy=count, screenshot_path=screenshot_path), None
        except E2EError as e:
            return flow.result, e


def _print_steps(result: FlowResult) -> None:
    if not result.steps:
        return

    table = Table(title="Purchase Flow")
    table.add_column("#", style="dim")
    table.add_column("Step", style="cyan")
    table.add_column("Screen", style="magenta")
    table.add_column("Status")
    table.add_column("Detail", style="dim", max_width=50)

    for step in result.steps:
        status = "[green]passed[/]" if step.status is StepStatus.PASSED else "[red]failed[/]"
        table.add_row(str(step.number), step.name, step.screen.value, status, step.detail)

    console.print(table)


@main.command("show-data")
@click.pass_context
def show_data(ctx: click.Context) -> None:
    """Show the fixture data used by the flow."""
    config: Config = ctx.obj["config"]
    test_data = TestDataProvider(config.test_data_path)

    table = Table(title="Credentials")
    table.add_column("Variant", style="cyan")
    table.add_column("Username")
    table.add_column("Password", style="dim")
    for name, creds in test_data.all_credentials().items():
        table.add_row(name, creds.username, creds.password)
    console.print(table)

    info = test_data.customer_info()
    console.print(f"\n[bold]Customer:[/] {info.first_name} {info.last_name}, {info.postal_code}")

    products = Table(title="Products")
    products.add_column("Key", style="cyan")
    products.add_column("Name")
    for key, name in test_data.products().items():
        products.add_row(key, name)
    console.print(products)


if __name__ == "__main__":
    main()
