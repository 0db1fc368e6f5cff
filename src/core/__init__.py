"""
Core refresh-rate value types and numerical primitives.

This module contains the foundational building blocks used by the display
scheduler to represent, convert and compare refresh rates. It is independent
of display-mode enumeration and rate-selection policy.
"""
