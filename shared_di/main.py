"""
Main entry point for the Shared DI command-line host.

The CLI stands in for a platform front-end: it loads configuration, starts
the container with the chosen platform's native module and prints the
greeting resolved from it.
"""

import sys
from typing import Optional

import typer
from loguru import logger

from .application.bootstrap import start
from .application.exceptions import RegistryException
from .application.module import identifier_name, merge
from .application.shared_module import shared_module
from .core.services.greeting import Greeting
from .infrastructure.config.loader import ConfigLoader
from .infrastructure.config.models import ApplicationConfig
from .infrastructure.logging.setup import setup_logging
from .infrastructure.platforms import get_native_module

cli = typer.Typer(
    name="shared-di",
    help="Dependency injection container shared between platform front-ends"
)


@cli.command()
def greet(
    platform: Optional[str] = typer.Option(
        None, "--platform", "-p", help="Native module to start with (android/ios/desktop)"
    ),
    platform_name: Optional[str] = typer.Option(
        None, "--platform-name", help="Platform name reported in the greeting"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="Configuration file path"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug mode"
    )
) -> None:
    """Start the container and print the greeting."""

    try:
        config = ConfigLoader().load_config(config_file)

        # Override with command line arguments
        if platform:
            config.platform = platform.lower()
        if platform_name:
            config.platform_name = platform_name
        if log_level:
            config.logging.level = log_level.upper()
        if debug:
            config.debug = True
            config.logging.level = "DEBUG"

        # Re-run validation after overrides
        config = ApplicationConfig.from_dict(config.to_dict())
    except (OSError, ValueError, TypeError) as e:
        typer.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    setup_logging(config.logging)

    logger.info(f"Starting {config.name} v{config.version} on {config.platform}")

    try:
        registry = start(get_native_module(config.platform), {"config": config})
        greeting = registry.resolve(Greeting)
        typer.echo(greeting.greet())
    except RegistryException as e:
        logger.error(f"Dependency injection failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
def bindings(
    platform: str = typer.Option(
        "desktop", "--platform", "-p", help="Native module to inspect (android/ios/desktop)"
    )
) -> None:
    """List the bindings the container is started with for a platform."""

    try:
        native_module = get_native_module(platform)
    except ValueError as e:
        typer.echo(str(e), err=True)
        sys.exit(1)

    merged = merge(native_module, shared_module)
    for binding in merged:
        typer.echo(f"{identifier_name(binding.identifier)} <- {binding.source}")


@cli.command()
def init_config(
    output: str = typer.Option(
        "config.yaml", "--output", "-o", help="Output configuration file"
    ),
    format: str = typer.Option(
        "yaml", "--format", "-f", help="Configuration format (yaml/json)"
    )
) -> None:
    """Generate a default configuration file."""

    config = ApplicationConfig()
    config_loader = ConfigLoader()

    try:
        config_loader.save_config(config, output, format)
        typer.echo(f"Default configuration saved to {output}")
    except (OSError, ValueError) as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
def validate_config(
    config_file: str = typer.Argument(...,
                                      help="Configuration file to validate")
) -> None:
    """Validate a configuration file."""

    config_loader = ConfigLoader()

    try:
        config = config_loader.load_config(config_file)
        typer.echo(f"Configuration file {config_file} is valid")
        typer.echo(f"Application: {config.name} v{config.version}")
        typer.echo(f"Platform: {config.platform}")
    except (OSError, ValueError, TypeError) as e:
        typer.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
