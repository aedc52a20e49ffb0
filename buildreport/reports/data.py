"""Report option models."""

from dataclasses import dataclass, field

from buildreport.matching import NO_FILTER, Filter


@dataclass(frozen=True)
class ReportOptions:
    """Filters and display modes shared by all part renderers."""

    module_filter: Filter = field(default=NO_FILTER)
    setting_filter: Filter = field(default=NO_FILTER)
    short_display: bool = False
    show_checksum: bool = False
