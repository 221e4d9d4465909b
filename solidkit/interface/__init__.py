"""
Interface layer for solidkit.

Provides the Research reporting component and the demo drivers.
"""

from solidkit.interface.research import Research
from solidkit.interface.demos import (
    dependency_inversion_demo,
    main,
    open_closed_demo,
    single_responsibility_demo,
)

__all__ = [
    "Research",
    "dependency_inversion_demo",
    "open_closed_demo",
    "single_responsibility_demo",
    "main",
]
