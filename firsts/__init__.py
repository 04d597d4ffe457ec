from .core import (
    ContractViolation,
    FirstOf,
    FirstSetTable,
    FirstsState,
    build,
    iter_passes,
)

__all__ = [
    "ContractViolation",
    "FirstOf",
    "FirstSetTable",
    "FirstsState",
    "build",
    "iter_passes",
]
