"""
ERP Dashboard API - Multi-branch ERP backend

A FastAPI-based service that manages branches and users and mints
branch-scoped, human-readable unique IDs (e.g. DH-0001) from atomic
database counters.
"""

__version__ = "0.1.0"
