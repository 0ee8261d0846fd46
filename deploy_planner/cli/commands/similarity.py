"""Name similarity command"""

import sys

import click

from ...api import ConfigError
from ...utils.similarity import similarity as score_names
from ..utils.output import console, print_error


@click.command()
@click.argument('name_a')
@click.argument('name_b')
@click.pass_context
def similarity(ctx, name_a, name_b):
    """Score how alike two component names are (0-100)

    Examples:
        deploy-planner similarity OrderService OrderServiceTest
    """
    try:
        threshold = ctx.obj.config.pairing.similarity_threshold
    except ConfigError as e:
        print_error("Invalid configuration", e)
        sys.exit(1)

    score = score_names(name_a, name_b)
    style = "green" if score > threshold else "yellow"
    console.print(f"[{style}]{score}[/{style}] (pairing threshold > {threshold})")
