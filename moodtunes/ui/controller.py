"""
Presentation controller for Moodtunes.

Holds the view state of the mood picker and the track list, independent of
how it is rendered.
"""
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol

from ..moods.profiles import available_moods


NO_MOOD_NOTICE = "Please select a mood!"


class ViewState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULTS = "results"


class RecommendationsGateway(Protocol):
    def fetch(self, mood: str) -> List[Dict[str, Any]]:
        ...


class RecommendationsController:
    """State machine behind the mood picker.

    IDLE -> LOADING -> RESULTS on success. A failed fetch is only logged:
    loading ends and the controller stays where it was (IDLE for a first
    request, RESULTS with the previous tracks for a refresh). There is no
    separate error state.
    """

    def __init__(self,
                 gateway: RecommendationsGateway,
                 moods: Optional[List[str]] = None,
                 on_notice: Optional[Callable[[str], None]] = None,
                 on_change: Optional[Callable[["RecommendationsController"], None]] = None):
        self.gateway = gateway
        self.moods = moods or available_moods()
        self.on_notice = on_notice
        self.on_change = on_change
        self.logger = logging.getLogger(__name__)

        self.mood = ""
        self.tracks: List[Dict[str, Any]] = []
        self.loading = False
        self.show_select_another = False

    @property
    def state(self) -> ViewState:
        if self.loading:
            return ViewState.LOADING
        if self.show_select_another:
            return ViewState.RESULTS
        return ViewState.IDLE

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    def select_mood(self, mood: str) -> None:
        self.mood = mood
        self._changed()

    def get_recommendations(self) -> bool:
        """Fetch tracks for the selected mood.

        Returns:
            True if new tracks were loaded
        """
        if not self.mood:
            if self.on_notice is not None:
                self.on_notice(NO_MOOD_NOTICE)
            else:
                self.logger.warning(NO_MOOD_NOTICE)
            return False

        self.loading = True
        self._changed()
        try:
            self.tracks = list(self.gateway.fetch(self.mood))
            self.show_select_another = True
            return True
        except Exception as e:
            self.logger.error(f"Error fetching recommendations: {e}")
            return False
        finally:
            self.loading = False
            self._changed()

    def refresh(self) -> bool:
        """Re-issue the request for the current mood."""
        return self.get_recommendations()

    def select_another_mood(self) -> None:
        self.tracks = []
        self.show_select_another = False
        self.mood = ""
        self._changed()
