"""Models for the application."""

from .git_models import DiffStat, DiffSummary
from .repository_models import Comparison, Repository

__all__ = ["Comparison", "DiffStat", "DiffSummary", "Repository"]
