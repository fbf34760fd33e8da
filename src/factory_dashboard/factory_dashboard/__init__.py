"""Factory Dashboard package.

This package is organized by feature modules (users, manpower, projects,
masterplan, ...) on top of an in-memory entity store, with a shared
view-model layer (access, filtering, sorting, timeline, export).
"""
