"""Configuration command"""

import sys

import click

from ...api import ConfigError
from ..utils.output import format_yaml, print_error


@click.command()
@click.pass_context
def config(ctx):
    """Show the effective configuration

    Examples:
        deploy-planner --config planner.yaml config
    """
    try:
        text = ctx.obj.config_service.dump_config()
    except ConfigError as e:
        print_error("Invalid configuration", e)
        sys.exit(1)

    format_yaml(text, title=str(ctx.obj.config_service.config_path))
