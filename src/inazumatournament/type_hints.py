"""Type hints used in Inazuma Tournament."""

from typing import List, Optional, Tuple

# Identifier of a team: an opponent id or the reserved player id
TeamId = str
MaybeTeamId = Optional[TeamId]

# Teams exempt from a round because of an odd count
ByeTeams = List[TeamId]

# One round of the bracket
Round = List["Match"]
Rounds = List[Round]

# Output of the pairing step: (matches, bye teams)
Pairings = Tuple[Round, ByeTeams]
