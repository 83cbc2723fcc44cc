"""
Core containers, math primitives and invariants.

Leaf-first: errors → math / contracts → domain (storage, Matrix, SquareMatrix).
"""
