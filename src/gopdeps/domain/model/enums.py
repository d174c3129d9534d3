"""Domain enumerations."""

from enum import Enum


class DependencyKind(Enum):
    """Where an imported package lives, relative to the scanned module."""

    STANDARD = "standard"  # no dot in first element: fmt, net/http, C
    MODULE = "module"  # the scanned module or a package inside it
    EXTERNAL = "external"  # any other module
