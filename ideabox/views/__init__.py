"""
Views module.

State machines behind the form, list and development pages.
"""

from ideabox.views.states import LOADING, READY, ERROR
from ideabox.views.form import IdeaFormView
from ideabox.views.list import IdeaListView
from ideabox.views.development import IdeaDevelopmentView

__all__ = [
    "LOADING",
    "READY",
    "ERROR",
    "IdeaFormView",
    "IdeaListView",
    "IdeaDevelopmentView",
]
