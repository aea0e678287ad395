"""Source discovery."""

from structcheck.application.discovery.sources import DEFAULT_EXCLUDES, discover_sources

__all__ = ["DEFAULT_EXCLUDES", "discover_sources"]
