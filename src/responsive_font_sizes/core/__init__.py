"""
Core domain models, numerical primitives and contracts.

Independent of any stylesheet tooling that calls the calculator.
"""
