"""
Per-session shared state handed to entities that need it.
"""
from dataclasses import dataclass

from games.ParachuteDrop.catcher import Catcher
from games.ParachuteDrop.score import ScoreState


@dataclass
class SessionContext:
    """Score and catcher for one game session.

    Passed explicitly to every falling entity so that two sessions never
    share counters.
    """
    score: ScoreState
    catcher: Catcher
