class ScoringError(Exception):
    """Base for all scoring errors."""


class InvalidPlayerCountError(ScoringError):
    """Wrong number of players for the requested format."""


class InvalidTeamsError(ScoringError):
    """Four-ball teams are missing or not split two and two."""


class InvalidPlacesError(ScoringError):
    """Six-points placements are not exactly three values."""


class PlayerSetupError(ScoringError):
    """A player could not be added to the group."""


class PlayerNotFoundError(ScoringError):
    """No player with the given id in the group."""
