"""
Infrastructure layer package.

This package contains modules for interacting with the outside world:
- Delimited-text (CSV) parsing and serialization
- Fetching the default dataset over HTTP
- Logging configuration
- Path utilities

Modules here must not import GUI frameworks (PySide6, Qt, etc.).
"""
