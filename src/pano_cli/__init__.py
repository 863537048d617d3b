"""pano-cli — command-line front end for a panorama stitcher.

Parses, expands, filters and validates the invocation into one immutable
configuration record handed to the stitching pipeline or the GUI.
"""

from pano_cli.version import __version__

__all__: list[str] = ["__version__"]
