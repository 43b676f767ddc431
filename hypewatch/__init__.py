"""Top-level package for AI Hype-Watch.

This package contains the application entrypoint and all supporting modules
for scouting AI business news, analyzing it for commercial bias, and
rendering the HTML report.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
