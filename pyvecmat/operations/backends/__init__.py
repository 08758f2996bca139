"""
Operation backends.

Available backends:
    CPUOperationBackend: CPU reference implementation on the value types
"""

from pyvecmat.operations.backends.cpu import CPUOperationBackend

__all__ = [
    "CPUOperationBackend",
]
