"""CLI entry point for scrap-paper."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from scrap_paper import __version__


def _build_overrides(max_capacity: int | None, storage: str | None) -> dict:
    overrides: dict = {}
    if max_capacity is not None:
        overrides['history'] = {'max_capacity': max_capacity}
    if storage:
        overrides['storage'] = {'path': storage}
    return overrides


@click.command()
@click.argument(
    'document',
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '-n',
    '--max-capacity',
    default=None,
    type=click.IntRange(min=1),
    help='Maximum number of saved scrap papers to keep.',
)
@click.option(
    '-s',
    '--storage',
    default=None,
    type=click.Path(dir_okay=False),
    help='File holding the saved scrap papers (defaults to the user data directory).',
)
@click.version_option(version=__version__)
def cli(document, config_path, max_capacity, storage):
    """scrap-paper -- a scratch surface with a cyclable history of saved snapshots.

    Opens DOCUMENT (read-only) and lets you swap to a scrap paper, save it,
    and cycle through previously saved scrap papers.
    """
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: not needed for --help

    from scrap_paper.l1_entities.errors import InvalidConfigError  # noqa: PLC0415 -- deferred: not needed for --help
    from scrap_paper.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from scrap_paper.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
        storage_path,
    )

    overrides = _build_overrides(max_capacity, storage)
    try:
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
    except (FileNotFoundError, InvalidConfigError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f'Error: invalid configuration:\n{e}', err=True)
        sys.exit(1)

    document_text = ''
    if document is not None:
        try:
            document_text = document.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f'Error: cannot open {document}: {e}', err=True)
            sys.exit(1)

    from scrap_paper.l4_frameworks_and_drivers.apps.scratch import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help
        ScratchApp,
    )
    from scrap_paper.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only when a session starts
        setup_file_logging,
    )

    try:
        setup_file_logging(storage_path(config).parent)
    except OSError as e:
        click.echo(f'Warning: cannot write debug log ({e}).', err=True)

    app = ScratchApp(
        config=config,
        document_path=document,
        document_text=document_text,
        config_path=config_path,
        overrides=overrides or None,
    )
    app.run()
