# draw_core/errors.py
from __future__ import annotations


class DrawError(Exception):
    """Base error; `message` is what the view shows to the user."""

    message = "Something went wrong."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NetworkError(DrawError):
    message = "Could not load the champion list."


class EmptyNameError(DrawError, ValueError):
    message = "Player name is blank."


class RosterFullError(DrawError, ValueError):
    message = "Maximum number of players reached (5 players)."


class DuplicateNameError(DrawError, ValueError):
    message = "Duplicate player name. Please choose a different name."


class EmptyRosterError(DrawError, ValueError):
    message = "Add at least one player before drawing."


class EmptyCatalogError(DrawError, ValueError):
    message = "No champions loaded yet."
