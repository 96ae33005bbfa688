from inazumatournament.models.opponent import DifficultyTier, Opponent, make_opponent_id
from inazumatournament.models.settings import TournamentSettings, load_settings
from inazumatournament.models.tournament import Match, Tournament, TournamentPhase

__all__ = [
    "DifficultyTier",
    "Opponent",
    "make_opponent_id",
    "TournamentSettings",
    "load_settings",
    "Match",
    "Tournament",
    "TournamentPhase",
]
