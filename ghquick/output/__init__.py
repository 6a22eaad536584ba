# ghquick Output Module
# Rich console output and diff display

from ghquick.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
