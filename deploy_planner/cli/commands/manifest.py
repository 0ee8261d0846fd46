"""Manifest generation command"""

import sys
from pathlib import Path

import click

from ...api import Planner, PlannerError
from ...constants import MANIFEST_ALL_FILE, MANIFEST_GROUP_FILE_PATTERN
from ...models import ManifestResult
from ..utils.output import (
    console,
    format_manifest_table,
    print_error,
    print_success,
    print_warning,
)


def manifest_filename(result: ManifestResult) -> str:
    """File name for a manifest: package-all.xml or package-group-N.xml

    N is the stage index plus one, so unassigned members land in group 0.
    """
    if result.group is None:
        return MANIFEST_ALL_FILE
    return MANIFEST_GROUP_FILE_PATTERN.format(index=result.group + 1)


@click.command()
@click.argument('edges_file', type=click.Path(dir_okay=False, path_type=Path))
@click.argument('catalog_file', type=click.Path(dir_okay=False, path_type=Path))
@click.option('-o', '--output', 'output_dir', type=click.Path(file_okay=False, path_type=Path),
              default=Path('manifests'), show_default=True, help='Output directory')
@click.option('--residual-policy', type=click.Choice(['report', 'force', 'fail']),
              help='How to handle components left over by dependency cycles')
@click.pass_context
def manifest(ctx, edges_file, catalog_file, output_dir, residual_policy):
    """Write package manifests for every deployment group

    Arguments:
        EDGES_FILE: JSON dependency records
        CATALOG_FILE: YAML or JSON component type catalog

    Examples:
        deploy-planner manifest dependencies.json catalog.yaml -o build/manifests
    """
    try:
        planner = Planner(ctx.obj.config)
        result = planner.plan_files(edges_file, catalog_file, residual_policy)

        output_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for manifest_result in result.manifests:
            path = output_dir / manifest_filename(manifest_result)
            path.write_text(manifest_result.text, encoding='utf-8')
            written.append((manifest_result, path))

        format_manifest_table(written)

        for warning in result.warnings:
            print_warning(warning)

        print_success(
            f"Wrote {len(written)} manifest(s) for {result.plan.group_count} group(s) to {output_dir}"
        )

    except PlannerError as e:
        print_error("Manifest generation failed", e)
        if ctx.obj.debug:
            console.print_exception()
        sys.exit(1)
