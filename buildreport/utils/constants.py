"""Constants used across buildreport."""


class Constants:
    """Part names, aliases and fixed report text."""

    # Part identifiers
    PART_TOOLCHAIN_VERSION = "toolchain-version"
    PART_PATH = "path"
    PART_MAIN_MODULE = "main-module"
    PART_MODULES = "modules"
    PART_BUILD_SETTINGS = "build-settings"
    PART_RAW = "raw"

    # Everything except the raw dump
    DEFAULT_PARTS = (
        PART_TOOLCHAIN_VERSION,
        PART_PATH,
        PART_MAIN_MODULE,
        PART_MODULES,
        PART_BUILD_SETTINGS,
    )

    PART_ALIASES: dict[str, tuple[str, ...]] = {
        "go": (PART_TOOLCHAIN_VERSION,),
        "go-vsn": (PART_TOOLCHAIN_VERSION,),
        "toolchain": (PART_TOOLCHAIN_VERSION,),
        "main": (PART_MAIN_MODULE,),
        "mods": (PART_MODULES,),
        "dep": (PART_MODULES,),
        "deps": (PART_MODULES,),
        "build-flags": (PART_BUILD_SETTINGS,),
        "build": (PART_BUILD_SETTINGS,),
        "settings": (PART_BUILD_SETTINGS,),
        "default": DEFAULT_PARTS,
    }

    PART_DESCRIPTIONS: dict[str, str] = {
        PART_TOOLCHAIN_VERSION: "show the toolchain version used to build the program",
        PART_PATH: "show the path of the main package",
        PART_MAIN_MODULE: "show the version of the main module",
        PART_MODULES: "show the module dependencies",
        PART_BUILD_SETTINGS: "show the settings used to build the program",
        PART_RAW: "show the full build information",
    }

    # Module table
    REPLACEMENT_INDENT = "   "
    MODULE_TYPE_MAIN = "M"
    MODULE_TYPE_DEPENDENCY = "D"
    MODULE_TYPE_REPLACED = "r"
    COLUMN_SEPARATOR = " "

    # Filter groups for configuration errors
    MODULE_FILTER_GROUP = "bad module filter"
    SETTING_FILTER_GROUP = "bad build-setting filter"

    NO_BUILD_INFO = "Build information not available"
