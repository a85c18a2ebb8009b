"""
Command Line Interface for helm-images.
"""
import json
import click
import yaml

from .. import __version__
from ..config import ExtractionConfig
from ..errors import ImageExtractionError
from ..EXTRACTORS.registry import supported_kinds
from ..MANAGERS.image_collector import ImageCollector
from ..UTILS.logging import LEVELS, setup_logging


def filter_registries(records, registries):
    """
    Keeps only the images hosted on one of the given registries, dropping
    records that are left without images.
    """
    prefixes = tuple(f"{registry.rstrip('/')}/" for registry in registries)
    filtered = []
    for record in records:
        images = [image for image in record.images if image.startswith(prefixes)]
        if images:
            filtered.append(record.model_copy(update={'images': images}))
    return filtered


def unique_images(records) -> list:
    """Returns every image once, in the order it was first seen."""
    seen = {}
    for record in records:
        for image in record.images:
            seen.setdefault(image, None)
    return list(seen)


def render_table(records) -> str:
    """Renders records as a fixed-width table, one row per image."""
    lines = [f"{'KIND':15} {'NAME':40} IMAGE", "-" * 80]
    for record in records:
        for image in record.images:
            lines.append(f"{record.kind:15} {record.name:40} {image}")
    return "\n".join(lines)


def render(records, output: str) -> str:
    data = [record.to_dict() for record in records]
    if output == 'json':
        return json.dumps(data, indent=2)
    if output == 'yaml':
        return yaml.safe_dump(data, sort_keys=False).rstrip("\n")
    return render_table(records)


def render_images(images, output: str) -> str:
    if output == 'json':
        return json.dumps(images, indent=2)
    if output == 'yaml':
        return yaml.safe_dump(images, sort_keys=False).rstrip("\n")
    return "\n".join(["IMAGE", "-" * 80] + images)


@click.group()
@click.option('--log-level', type=click.Choice(list(LEVELS)), default=None,
              help='Log level, overrides HELM_IMAGES_LOG_LEVEL')
@click.option('--env-file', default='.env', show_default=True,
              help='File with HELM_IMAGES_* settings')
@click.pass_context
def cli(ctx, log_level, env_file):
    """
    helm-images - list the container images of rendered Kubernetes manifests.

    Pipe the output of `helm template` into `helm-images get` to see every
    image a chart would deploy.
    """
    ctx.ensure_object(dict)
    ctx.obj['env_file'] = env_file
    ctx.obj['log_level'] = log_level


@cli.command()
@click.argument('files', nargs=-1, type=click.File('r'))
@click.option('--kind', '-k', 'kinds', multiple=True, type=click.Choice(supported_kinds()),
              help='Only extract images from these kinds (repeatable)')
@click.option('--output', '-o', type=click.Choice(['json', 'yaml', 'table']), default='yaml',
              show_default=True, help='Output format')
@click.option('--skip-errors', is_flag=True, default=False,
              help='Skip manifests that fail to extract instead of failing')
@click.option('--registry', '-r', 'registries', multiple=True,
              help='Only list images from this registry (repeatable)')
@click.option('--unique', '-u', is_flag=True, default=False,
              help='List each image once, without kind and name')
@click.pass_context
def get(ctx, files, kinds, output, skip_errors, registries, unique):
    """Fetch all images from rendered manifests in FILES (stdin by default)."""
    try:
        config = ExtractionConfig.from_env(
            ctx.obj['env_file'],
            kinds=list(kinds) or None,
            skip_errors=skip_errors or None,
            log_level=ctx.obj['log_level'],
        )
    except ValueError as e:
        raise click.UsageError(str(e))
    setup_logging(config.log_level)

    if not files:
        files = (click.open_file('-'),)

    collector = ImageCollector(config)
    records = []
    try:
        for stream in files:
            records.extend(collector.collect(stream.read()))
    except ImageExtractionError as e:
        raise click.ClickException(str(e))

    if registries:
        records = filter_registries(records, registries)
    if unique:
        click.echo(render_images(unique_images(records), output))
    else:
        click.echo(render(records, output))


@cli.command()
def kinds():
    """List the kinds images can be extracted from."""
    for kind in supported_kinds():
        click.echo(kind)


@cli.command()
def version():
    """Print the version of helm-images."""
    click.echo(f"helm-images version: {__version__}")


def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})


if __name__ == '__main__':
    main()
