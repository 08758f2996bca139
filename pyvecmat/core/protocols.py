"""
Core protocols for PyVecMat.

These define structural interfaces that operation backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look right, not inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pyvecmat.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated operand design plus the name of one
    operation and produces a Result. Backends are stateless, so they are
    easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_reference'.
        """
        ...

    def solve(self, design: D, *, operation: str) -> Result[P]:
        """
        Execute one operation on the design's operands.

        Raises:
            ValidationError: If the operation is unknown or the design lacks
                an operand it needs
            DimensionError: If operand shapes are incompatible
        """
        ...
