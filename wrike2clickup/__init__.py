"""
wrike2clickup: convert a Wrike account export into ClickUp's import format.

Flattens Wrike's nested subtask trees, resolves users and statuses, and
turns folder membership into ClickUp lists and tags.
"""

__version__ = "1.0.0"

# Import the main CLI app for entry point
from .cli import app

__all__ = ["app", "__version__"]
