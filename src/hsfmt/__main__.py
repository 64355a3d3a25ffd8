from .hsfmt import cli

cli()
