"""
Core pricing engine, mathematical primitives, and invariants.

This module contains the bonding curve formulas and the numeric building
blocks they rely on. Every operation is a pure function of its inputs.
"""
