"""
CPU reference backend for vector and matrix operations.

Runs one operation on the value types and records timing and warnings.
"""

from __future__ import annotations

import math
import warnings

import numpy as np

from pyvecmat.core.compute.timing import Timer
from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.result import Result
from pyvecmat.linalg.matrix import Matrix
from pyvecmat.linalg.vector import Vector
from pyvecmat.operations.design import OperandDesign
from pyvecmat.operations.solution import OperationParams


VECTOR_OPERATIONS = ('add', 'scale', 'dot', 'cross')
MATRIX_OPERATIONS = ('add', 'scale', 'matmul', 'transpose')


class CPUOperationBackend:
    """CPU reference backend for vector and matrix operations."""

    @property
    def name(self) -> str:
        return 'cpu_reference'

    def solve(
        self,
        design: OperandDesign,
        *,
        operation: str,
    ) -> Result[OperationParams]:
        """
        Execute one operation on the design's operands.

        Parameters
        ----------
        design : OperandDesign
        operation : str
            For vectors: 'add', 'scale', 'dot', 'cross'.
            For matrices: 'add', 'scale', 'matmul', 'transpose'.
        """
        allowed = VECTOR_OPERATIONS if design.kind == 'vector' else MATRIX_OPERATIONS
        if operation not in allowed:
            raise ValidationError(
                f"Unknown {design.kind} operation: {operation!r}. "
                f"Must be one of {', '.join(repr(op) for op in allowed)}."
            )

        timer = Timer()
        timer.start()

        warnings_list: list[str] = []

        with timer.section('compute'):
            value = _dispatch(design, operation)

        n_bad = _count_non_finite(value)
        if n_bad:
            msg = (
                f"{operation}: result contains {n_bad} non-finite value(s); "
                f"the computation overflowed"
            )
            warnings_list.append(msg)
            warnings.warn(msg, RuntimeWarning, stacklevel=2)

        timer.stop()

        return Result(
            params=OperationParams(operation=operation, value=value),
            info={
                'operation': operation,
                'operand_kind': design.kind,
                'operand_shapes': design.operand_shapes,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def _dispatch(design: OperandDesign, operation: str) -> float | Vector | Matrix:
    a = design.a

    if operation == 'add':
        return a.add(design.require_b(operation))
    if operation == 'scale':
        return a.multiply(design.require_scalar(operation))
    if operation == 'dot':
        return a.scalar_product(design.require_b(operation))
    if operation == 'cross':
        return a.vector_product(design.require_b(operation))
    if operation == 'matmul':
        return a.matrix_multiplication(design.require_b(operation))
    if operation == 'transpose':
        return a.transpose()

    raise ValidationError(f"Unknown operation: {operation!r}")


def _count_non_finite(value: float | Vector | Matrix) -> int:
    if isinstance(value, (Vector, Matrix)):
        return int(np.sum(~np.isfinite(value.to_array())))
    return 0 if math.isfinite(value) else 1
