"""CLI subcommands for collit."""
