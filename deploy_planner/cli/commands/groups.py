"""Deployment groups command"""

import sys
from pathlib import Path

import click

from ...api import Planner, PlannerError
from ..utils.output import console, format_groups, format_diagnostics, print_error


@click.command()
@click.argument('edges_file', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--residual-policy', type=click.Choice(['report', 'force', 'fail']),
              help='How to handle components left over by dependency cycles')
@click.option('--json', 'as_json', is_flag=True, help='Print the plan as JSON')
@click.pass_context
def groups(ctx, edges_file, residual_policy, as_json):
    """Show deployment groups for a dependency edge list

    Arguments:
        EDGES_FILE: JSON dependency records (array or {"records": [...]})

    Examples:
        # Show groups
        deploy-planner groups dependencies.json

        # Put cyclic leftovers into a final group
        deploy-planner groups dependencies.json --residual-policy force

        # Machine-readable plan
        deploy-planner groups dependencies.json --json
    """
    try:
        planner = Planner(ctx.obj.config)
        result = planner.plan_files(edges_file, residual_policy=residual_policy)

        if as_json:
            console.print_json(data=result.to_dict())
            return

        format_groups(result)
        format_diagnostics(result)

        if ctx.obj.verbose and result.duration is not None:
            console.print(f"[dim]Resolved in {result.duration:.3f}s[/dim]")

    except PlannerError as e:
        print_error("Planning failed", e)
        if ctx.obj.debug:
            console.print_exception()
        sys.exit(1)
