"""
Operation solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TYPE_CHECKING

from pyvecmat.core.result import Result
from pyvecmat.linalg.matrix import Matrix
from pyvecmat.linalg.vector import Vector

if TYPE_CHECKING:
    from pyvecmat.operations.design import OperandDesign


ValueKind = Literal['scalar', 'vector', 'matrix']


@dataclass(frozen=True)
class OperationParams:
    """
    Parameter payload for a single operation.

    value is a float for 'dot', a Vector for vector results and a Matrix
    for matrix results.
    """
    operation: str
    value: float | Vector | Matrix

    @property
    def kind(self) -> ValueKind:
        if isinstance(self.value, Vector):
            return 'vector'
        if isinstance(self.value, Matrix):
            return 'matrix'
        return 'scalar'


@dataclass
class OperationSolution:
    """
    User-facing operation result.

    Wraps Result[OperationParams] and provides convenient accessors plus a
    plain-text rendering for display.
    """
    _result: Result[OperationParams]
    _design: 'OperandDesign'

    @property
    def value(self) -> float | Vector | Matrix:
        """The computed scalar, Vector or Matrix."""
        return self._result.params.value

    @property
    def operation(self) -> str:
        return self._result.params.operation

    @property
    def kind(self) -> ValueKind:
        return self._result.params.kind

    def to_list(self) -> float | list[float] | list[list[float]]:
        """Result as plain Python data (float, list, or list of rows)."""
        value = self.value
        if isinstance(value, Vector):
            return value.to_list()
        if isinstance(value, Matrix):
            return value.to_2d_list()
        return value

    # --- Metadata ---

    @property
    def design(self) -> 'OperandDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text rendering of the operation and its result."""
        shapes = " x ".join(str(s) for s in self._design.operand_shapes)
        lines = [
            f"Operation: {self.operation} ({self.backend_name})",
            f"Operands:  {shapes}",
        ]
        if self._design.scalar is not None:
            lines.append(f"Scalar:    {self._design.scalar:.6g}")

        value = self.value
        if isinstance(value, Matrix):
            lines.append(f"Result ({value.n} x {value.m}):")
            lines.extend(_format_rows(value.to_2d_list()))
        elif isinstance(value, Vector):
            lines.append(f"Result ({value.dimension}):")
            lines.extend(_format_rows([value.to_list()]))
        else:
            lines.append(f"Result:    {value:.6g}")

        for w in self.warnings:
            lines.append(f"Warning:   {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"OperationSolution(operation={self.operation}, "
            f"kind={self.kind}, backend={self.backend_name})"
        )


def _format_rows(rows: list[list[float]]) -> list[str]:
    cells = [[f"{x:.6g}" for x in row] for row in rows]
    if not cells or not cells[0]:
        return ["  []"]
    widths = [max(len(row[j]) for row in cells) for j in range(len(cells[0]))]
    return [
        "  " + "  ".join(c.rjust(w) for c, w in zip(row, widths))
        for row in cells
    ]
