"""Runtime helpers: error codes, paths, strings, file descriptions, resource archives, tasks and synchronisation."""

__version__ = "0.1.0"
__all__ = ["errors", "path", "strutil", "fsport", "resources", "tasks", "sync"]