from scrap_paper.l4_frameworks_and_drivers.cli import cli

cli()
