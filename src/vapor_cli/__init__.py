"""vapor-cli — command-line toolbox for Swift/Vapor web projects.

Routes a verb (``build``, ``run``, ``new`` …) to a registered command
that drives external tools such as swift, curl, tar, git and heroku.
"""

from vapor_cli.version import __version__

__all__: list[str] = ["__version__"]
