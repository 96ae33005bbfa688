from collections import deque
from typing import Iterable, List, Optional, Sequence

import pytest

from inazumatournament.catalog import StaticOpponentCatalog
from inazumatournament.models.opponent import DifficultyTier, Opponent, make_opponent_id
from inazumatournament.models.settings import TournamentSettings
from inazumatournament.utils.random_source import RandomSource


class ScriptedRandomSource(RandomSource):
    """Deterministic source: keeps order on shuffle, takes the first k on a
    draw, and answers ``chance`` from a queue (True once the queue is empty)."""

    def __init__(self, outcomes: Optional[Iterable[bool]] = None):
        super().__init__(seed=0)
        self.outcomes = deque(outcomes or [])
        self.probabilities: List[float] = []

    def shuffle(self, items):
        pass

    def choose_without_replacement(self, items: Sequence, k: int) -> list:
        return list(items)[:k]

    def chance(self, probability: float) -> bool:
        self.probabilities.append(probability)
        return self.outcomes.popleft() if self.outcomes else True


def make_opponent(
    team: str,
    *levels: int,
    series: str = "IE1",
    source: str = "Story",
    names: Optional[Sequence[str]] = None,
) -> Opponent:
    """Catalog opponent with one tier per level (Normal, Hard, ... by default)."""
    names = names or ["Normal", "Hard", "Expert", "Legend"]
    return Opponent(
        id=make_opponent_id(team, series, source),
        team_name=team,
        series_short=series,
        series_full="Inazuma Eleven",
        source=source,
        difficulties=[DifficultyTier(n, lv) for n, lv in zip(names, levels)],
    )


def make_settings(opponents: Iterable[Opponent], **overrides) -> TournamentSettings:
    """Settings with every given opponent unlocked."""
    values = dict(
        player_team_level=50,
        team_count=4,
        level_tolerance_lower=5,
        level_tolerance_upper=5,
        level_win_rate_modifier=1,
        unlocked_opponents=[o.id for o in opponents],
    )
    values.update(overrides)
    return TournamentSettings(**values)


@pytest.fixture
def scripted_rng():
    return ScriptedRandomSource()


@pytest.fixture
def seeded_rng():
    return RandomSource(seed=20240601)


@pytest.fixture
def worked_example_opponents():
    """Three single-tier opponents at levels 48, 52 and 70."""
    return [
        make_opponent("A", 48),
        make_opponent("B", 52),
        make_opponent("C", 70),
    ]


@pytest.fixture
def eight_opponents():
    return [make_opponent(f"Team {i}", 46 + i) for i in range(8)]


@pytest.fixture
def static_catalog(worked_example_opponents):
    return StaticOpponentCatalog(worked_example_opponents)


CSV_HEADER = (
    "team,series,series_full,source,"
    "difficulty_1,level_1,difficulty_2,level_2,"
    "difficulty_3,level_3,difficulty_4,level_4"
)


@pytest.fixture
def write_csv(tmp_path):
    """Write catalog rows below the standard header and return the path."""

    def _write(*rows: str, header: str = CSV_HEADER, name: str = "opponents.csv"):
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write
