"""
git-porcelain - A typed Python layer over the git command line
"""

from .__version__ import __version__
from .core import ChangeTracker, GitClient, RepositoryState
from .cli.main import main

__all__ = ["GitClient", "RepositoryState", "ChangeTracker", "main", "__version__"]
