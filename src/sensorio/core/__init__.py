"""Core domain logic package.

This package contains pure business logic for editing the sensor database.
Modules here must not import GUI frameworks (PySide6, Qt, etc.).
"""
