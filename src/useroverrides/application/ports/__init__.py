"""Application ports - interfaces for external adapters."""

from useroverrides.application.ports.permission_checker import PermissionChecker
from useroverrides.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
