"""
Movie Characters API Application Package.

This package contains the REST API, service layer, database models and
utilities for managing movies, characters and franchises.
"""

__version__ = "1.0.0"
