"""
Qt adapters package.

Thin PySide6 collaborators that call into the core: background workers and
item models. Nothing here holds editing state of its own.
"""
