"""Domain services for doubleguard.

Pure functions with no process-wide state:
- classify: recognise a test double and what it verifies against
- satisfies / forgives: decide whether a failed check should pass
"""

from .compatibility_judge import forgives, satisfies
from .double_classifier import classify

__all__ = [
    "classify",
    "forgives",
    "satisfies",
]
