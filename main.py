import argparse
import sys
import os
from typing import Optional
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from moodtunes.config.settings import ConfigManager, AppConfig
from moodtunes.utils.logging import StructuredLogger, configure_logging
from moodtunes.ui.controller import RecommendationsController
from moodtunes.ui.gateway import HttpRecommendationsGateway
from moodtunes.ui.console import ConsoleView


class MoodtunesConsole:
    def __init__(self, config_path: Optional[str] = None, api_url: Optional[str] = None):
        self.config_manager = ConfigManager()
        self.config: Optional[AppConfig] = None
        self.logger: Optional[StructuredLogger] = None
        self.config_path = config_path
        self.api_url = api_url

    def initialize(self) -> None:
        try:
            self.config = self.config_manager.load(self.config_path)
        except Exception as e:
            print(f"Failed to initialize Moodtunes: {e}")
            sys.exit(1)
        configure_logging(self.config.logging.level, "text")
        self.logger = StructuredLogger("moodtunes.console", level=self.config.logging.level)
        if self.api_url:
            self.config.client.api_url = self.api_url.rstrip('/')
        self.logger.debug("Moodtunes console initialized", api_url=self.config.client.api_url)

    def run(self, mood: Optional[str] = None) -> None:
        gateway = HttpRecommendationsGateway(self.config.client.api_url)
        controller = RecommendationsController(gateway)
        view = ConsoleView(controller)
        view.run(initial_mood=mood)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Moodtunes - pick a mood, get Spotify recommendations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The console talks to a running Moodtunes API (start it with: python api.py).

Examples:
  python main.py
  python main.py --mood chill
  python main.py --api-url http://localhost:8080
        """
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to configuration file (default: packaged default_config.yaml)"
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help="Base URL of the Moodtunes API (default: client.api_url from config)"
    )
    parser.add_argument(
        "--mood",
        default=None,
        help="Fetch recommendations for this mood right away"
    )
    return parser


def main():
    parser = create_parser()
    args = parser.parse_args()
    app = MoodtunesConsole(args.config, args.api_url)
    app.initialize()
    try:
        app.run(args.mood)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")
        sys.exit(0)


if __name__ == "__main__":
    main()
