"""
Kernel layer.

- `mediaclock/kernels/spec/` holds the kernel descriptions (.yaml) with their
  domain bounds and conformance vectors.
- `mediaclock/kernels/python/` holds the Python kernels that implement them.
"""
