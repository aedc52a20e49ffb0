"""Pattern matching for report entries."""

from buildreport.matching.filter import NO_FILTER, Filter

__all__ = ["Filter", "NO_FILTER"]
