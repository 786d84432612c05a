"""
Core value types and the numerical primitives they are built on.

Pure, side-effect-free code: no I/O, no shared mutable state.
"""
