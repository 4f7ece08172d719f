from minimalcss.cli.main import cli

__all__ = ["cli"]
