"""Search your dev.to draft articles from the command line.

The package is split into a small configuration layer, the article
fetcher with its local JSON cache, and pure search helpers.
"""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
