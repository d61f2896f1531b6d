"""
Contracts API: clients, contractors, contracts and jobs over a relational store
"""

__version__ = "1.0.0"
