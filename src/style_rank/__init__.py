"""Style Rank - code quality ranking for JavaScript and TypeScript sources."""

__version__ = "0.3.0"
__author__ = "Style Rank Contributors"

from .core.exceptions import StyleRankError

__all__ = ["StyleRankError", "__version__"]
