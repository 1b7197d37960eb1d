"""
Moodtunes - mood-based Spotify track recommendations.

Modules:
    - config: Configuration loading and validation
    - moods: Mood profiles and per-request target derivation
    - spotify: Token exchange and recommendations client
    - recommendation: Orchestration, schemas and failure kinds
    - api: FastAPI routes, schemas and dependencies
    - ui: Presentation controller and console view
    - utils: Structured logging
"""

__version__ = "1.0.0"
