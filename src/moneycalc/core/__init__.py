"""
Core value types, decimal primitives and the compound-argument contract.

Independent of any concrete formula.
"""
