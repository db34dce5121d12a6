"""
Household - Domain Model Package

A small domain model of people, jobs, money and families.

DESIGN PRINCIPLES:
1. Values are immutable, entities are mutable
2. Every mutation path re-checks the invariant it guards
3. Failures are raised, never terminate the process
4. Policy rejections are audited, not raised
"""

__version__ = "1.0.0"
__author__ = "Household Domain Model Team"
