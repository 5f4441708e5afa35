"""ghpp — pretty-print GitHub repository metadata in the terminal.

Fetches a single repository from the GitHub REST API and renders a
selectable set of fields with colour and optional relative dates.
"""

from ghpp.version import __version__

__all__: list[str] = ["__version__"]
