"""
Generic result container for all PyVecMat operations.

The Result class provides a standardized envelope that the operation layer
returns for every user action. This enables shared tooling for timing,
warnings and display while letting each operation define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (operation name, operand shapes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a single operation.

    Type Parameters:
        P: The operation-specific payload type

    Attributes:
        params: Operation payload (the computed value and its kind)
        info: Structured metadata (operation, operand shapes)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=OperationParams(operation='dot', value=32.0),
        ...     info={'operation': 'dot', 'operand_shapes': ((3,), (3,))},
        ...     timing={'total_seconds': 1e-5},
        ...     backend_name='cpu_reference'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
