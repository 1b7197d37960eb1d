"""
Console rendering of the Moodtunes presentation controller.
"""
from typing import Any, Callable, Dict, Optional

from .controller import RecommendationsController, ViewState


class ConsoleView:
    """Text front end for a RecommendationsController.

    Reads choices with ``input_func`` and writes with ``output_func`` so it
    can be driven by scripts and tests as well as a terminal.
    """

    def __init__(self,
                 controller: RecommendationsController,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.controller = controller
        self.input = input_func
        self.output = output_func
        controller.on_notice = self.output
        controller.on_change = self.render

    def render(self, controller: Optional[RecommendationsController] = None) -> None:
        controller = controller or self.controller
        if controller.state is ViewState.LOADING:
            self.output("Loading...")

    def show_menu(self) -> None:
        self.output("")
        self.output("=" * 60)
        self.output("Music Recommendation App")
        self.output("=" * 60)
        self.output("Simply select a mood to get started. Refresh for a new set if needed.")
        for i, mood in enumerate(self.controller.moods, 1):
            self.output(f"{i:2d}. {mood.capitalize()}")

    def show_tracks(self) -> None:
        tracks = self.controller.tracks
        if not tracks:
            return
        self.output("")
        for i, track in enumerate(tracks, 1):
            self.output(self.format_track(i, track))

    @staticmethod
    def format_track(index: int, track: Dict[str, Any]) -> str:
        lines = [
            f"{index:2d}. Track: {track.get('name')}",
            f"    Artist: {track.get('artist')}",
            f"    Album: {track.get('album')}",
            f"    Listen on Spotify: {track.get('spotifyUrl')}",
        ]
        return "\n".join(lines)

    def choose_mood(self) -> Optional[str]:
        """Prompt for a mood by number or name; returns None to quit."""
        answer = self.input("Choose a mood (number or name, q to quit): ").strip()
        if answer.lower() in ("q", "quit", "exit"):
            return None
        if answer.isdigit():
            index = int(answer) - 1
            if 0 <= index < len(self.controller.moods):
                return self.controller.moods[index]
            return ""
        return answer.lower()

    def run(self, initial_mood: Optional[str] = None) -> None:
        """Interactive loop: pick a mood, show tracks, refresh or pick again."""
        controller = self.controller
        pending = initial_mood
        while True:
            if controller.state is ViewState.IDLE:
                if pending is None:
                    self.show_menu()
                    mood = self.choose_mood()
                    if mood is None:
                        return
                else:
                    mood, pending = pending, None
                controller.select_mood(mood)
                if controller.get_recommendations():
                    self.show_tracks()
                continue

            answer = self.input("[s]elect another mood, [r]efresh, [q]uit: ").strip().lower()
            if answer in ("q", "quit", "exit"):
                return
            if answer.startswith("s"):
                controller.select_another_mood()
            elif answer.startswith("r"):
                if controller.refresh():
                    self.show_tracks()
