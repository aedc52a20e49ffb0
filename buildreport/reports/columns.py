"""Column sizing for the module table."""

from collections.abc import Iterable
from dataclasses import dataclass

from buildreport.core.types import Module
from buildreport.utils.constants import Constants


@dataclass(frozen=True)
class ModuleColumns:
    """Widths of the module table columns.

    ``checksum`` is None when checksums are not shown; the column is then
    absent from the table.
    """

    path: int
    version: int
    checksum: int | None

    @property
    def headers(self) -> tuple[str, ...]:
        if self.checksum is None:
            return ("Path", "Version")
        return ("Path", "Version", "Checksum")

    @property
    def widths(self) -> tuple[int, ...]:
        if self.checksum is None:
            return (self.path, self.version)
        return (self.path, self.version, self.checksum)


def compute_module_columns(
    main_module: Module, dependencies: Iterable[Module], show_checksum: bool
) -> ModuleColumns:
    """Return the widths needed to show every module without truncation.

    The main module, each dependency and each replacement are measured.
    Replacement paths are shown indented, so the indent counts towards
    their width.

    Args:
        main_module: The main module
        dependencies: The dependency modules
        show_checksum: Whether the checksum column is shown

    Returns:
        The column widths
    """
    path_width = len(main_module.path)
    version_width = len(main_module.version)
    checksum_width = len(main_module.checksum)

    for dep in dependencies:
        path_width = max(path_width, len(dep.path))
        version_width = max(version_width, len(dep.version))
        checksum_width = max(checksum_width, len(dep.checksum))

        repl = dep.replacement
        if repl is not None:
            path_width = max(path_width, len(repl.path) + len(Constants.REPLACEMENT_INDENT))
            version_width = max(version_width, len(repl.version))
            checksum_width = max(checksum_width, len(repl.checksum))

    return ModuleColumns(
        path=path_width,
        version=version_width,
        checksum=checksum_width if show_checksum else None,
    )
