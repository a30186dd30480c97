from ember.cli.cmd import cli

__all__ = ["cli"]
