"""
Python kernels.

These modules are:
- integer-only and deterministic,
- explicit about intermediate widths and wraparound,
- pure functions with typed results,
- checked against the vector corpus in `mediaclock/kernels/spec/`.
"""
