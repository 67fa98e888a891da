"""git-repo-name - keep a repository directory name and its remote in sync."""

__version__ = "0.1.0"
