from inazumatournament.models.tournament.match import Match
from inazumatournament.models.tournament.tournament import Tournament, TournamentPhase

__all__ = [
    "Match",
    "Tournament",
    "TournamentPhase",
]
