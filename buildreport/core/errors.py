"""Exception types raised by buildreport."""

from __future__ import annotations

from buildreport.utils.constants import Constants


class BuildReportError(Exception):
    """Base class for all buildreport errors."""


class InvalidPatternError(BuildReportError):
    """A filter pattern does not compile as a regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class ConfigurationError(BuildReportError):
    """One or more filter patterns were rejected.

    The errors are grouped by the name of the filter they belong to, e.g.
    ``"bad module filter"``.
    """

    def __init__(self, groups: dict[str, list[InvalidPatternError]]):
        self.groups = groups
        count = sum(len(errs) for errs in groups.values())
        names = ", ".join(groups)
        super().__init__(f"{count} invalid filter pattern(s) in: {names}")


class BuildInfoUnavailableError(BuildReportError):
    """The build-information record could not be obtained."""

    def __init__(self, message: str = Constants.NO_BUILD_INFO):
        super().__init__(message)


class UnknownPartError(BuildReportError):
    """A requested report part is not one of the known parts."""

    def __init__(self, part: str):
        self.part = part
        super().__init__(f"bad report part: {part}")
