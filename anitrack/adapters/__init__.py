"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ :
- file_system : lecture de l'arborescence (IFileSystem)
- cli/ : commandes de diagnostic (Typer + Rich)

core/ ne depend jamais des adaptateurs.
"""

from anitrack.adapters.file_system import FileSystemAdapter

__all__ = [
    "FileSystemAdapter",
]
