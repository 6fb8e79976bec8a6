"""Click subcommands registered on :func:`bitio.cli.cli`."""
