"""
Presentation layer for Moodtunes.

A view-agnostic controller for the mood picker plus a console front end
that talks to a running Moodtunes API.
"""

from .controller import RecommendationsController, ViewState, NO_MOOD_NOTICE
from .gateway import HttpRecommendationsGateway
from .console import ConsoleView

__all__ = [
    'RecommendationsController',
    'ViewState',
    'NO_MOOD_NOTICE',
    'HttpRecommendationsGateway',
    'ConsoleView'
]
