"""Base class for agents that play a boss battle headlessly.

The simulator calls these at decision points: which answer to give for
the current question and whether to drink a potion first.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quiz_boss.content.perks import PotionKind
    from quiz_boss.content.questions import Question
    from quiz_boss.sim.core.battle_session import BattleSession
    from quiz_boss.sim.mechanics.answers import PlayerAnswer


class QuizAgent(ABC):
    """Base class for agents that answer questions."""

    @abstractmethod
    def choose_answer(
        self,
        session: BattleSession,
        question: Question,
    ) -> PlayerAnswer | None:
        """Answer *question*.

        Returns
        -------
        PlayerAnswer | None
            The answer to submit, or ``None`` to let the countdown run
            out.
        """

    @abstractmethod
    def choose_potion(self, session: BattleSession) -> PotionKind | None:
        """Pick a potion to drink before answering, or ``None``.

        Called repeatedly until it returns ``None`` so several potions
        can be used before one answer.
        """
