"""CLI commands for fitcoach-catalog."""

from .export import export
from .init import init
from .reconcile_cmd import reconcile_cmd
from .restore import restore
from .spec import spec
from .status import status

__all__ = [
    "export",
    "init",
    "reconcile_cmd",
    "restore",
    "spec",
    "status",
]
