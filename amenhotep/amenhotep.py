from pathlib import Path

import click

from .exceptions import AmenhotepError
from .logging_config import setup_logging
from .pipeline import ConsoleWriter, FileWriter, GeneratorConfig, IndexerGenerator, Writer

PATHS = click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))


@click.group()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.option("--quiet", "-q", is_flag=True, default=False, help="Only log errors")
@click.pass_context
def amenhotep(ctx, config, verbose, quiet):
    """Generate Checkpoint indexer scaffolding from Cairo contracts."""
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        ctx.obj = GeneratorConfig.from_file(config) if config is not None else GeneratorConfig()
    except AmenhotepError as e:
        raise click.ClickException(str(e)) from e


@amenhotep.command("dry-run")
@PATHS
@click.pass_obj
def dry_run(config, paths):
    """Check the expected output."""
    _run(config, paths, ConsoleWriter())


@amenhotep.command("generate")
@click.option("--output-dir", "-o", default=None, type=click.Path(file_okay=False, path_type=Path))
@PATHS
@click.pass_obj
def generate(config, output_dir, paths):
    """Generate the files output."""
    directory = output_dir if output_dir is not None else Path(config.output.directory)
    _run(config, paths, FileWriter(directory, mode=config.output.mode, atomic=config.output.atomic_write))


def _run(config: GeneratorConfig, paths: tuple[Path, ...], writer: Writer) -> None:
    try:
        IndexerGenerator(config).run(paths, writer)
    except AmenhotepError as e:
        raise click.ClickException(str(e)) from e
