"""Battle simulation runner -- plays whole battles headlessly.

Provides two classes:

- **BattleSimulator**: drives one :class:`BattleEngine` to the stats
  screen with a :class:`QuizAgent` answering.
- **BatchRunner**: plays many seeded battles (optionally in parallel) and
  collects their attempt summaries for balance analysis.
"""

from __future__ import annotations

import logging
import multiprocessing
from typing import Any

from quiz_boss.content.perks import PassivePerk
from quiz_boss.content.quiz import QuizPayload
from quiz_boss.sim.config import BattleRules
from quiz_boss.sim.core.rng import GameRNG
from quiz_boss.sim.engine import BattleEngine
from quiz_boss.sim.play_agents.base import QuizAgent
from quiz_boss.sim.play_agents.random_agent import RandomAgent
from quiz_boss.sim.stats import AttemptSummary

logger = logging.getLogger(__name__)

# Hard cap on resolved turns; a battle that wraps its question list
# forever is cut off here and counted as a loss.
_MAX_TURNS = 500


class BattleSimulator:
    """Runs a single battle to completion.

    Parameters
    ----------
    engine:
        A freshly created engine still in the lobby.
    agent:
        The agent answering questions.
    answer_delay:
        Seconds fed to :meth:`BattleEngine.tick` before each answer, so the
        summary carries a plausible play time.
    """

    def __init__(
        self,
        engine: BattleEngine,
        agent: QuizAgent,
        answer_delay: float = 5.0,
    ) -> None:
        self.engine = engine
        self.agent = agent
        self.answer_delay = answer_delay

    def run(
        self,
        passive: PassivePerk | None = None,
        nickname: str = "sim",
    ) -> AttemptSummary:
        """Play the battle and return its summary.

        *passive* fixes the roulette result; ``None`` spins it.
        """
        engine = self.engine
        engine.open_roulette()
        engine.select_passive(passive)

        while not engine.is_over:
            if engine.session.turns >= _MAX_TURNS:
                logger.warning("Battle hit the %d-turn cap; abandoning", _MAX_TURNS)
                self._abandon()
                break
            self._play_turn()

        return engine.summary(nickname)

    def _play_turn(self) -> None:
        engine = self.engine
        session = engine.session

        while (potion := self.agent.choose_potion(session)) is not None:
            if not engine.use_potion(potion):
                break

        question = engine.current_question
        if question is None:
            raise RuntimeError(f"No question to answer during {session.phase.value}")

        answer = self.agent.choose_answer(session, question)
        if answer is None:
            # Let the countdown run out.
            engine.tick(engine.countdown.remaining)
            return

        engine.tick(min(self.answer_delay, max(engine.countdown.remaining - 0.01, 0.0)))
        engine.submit(answer)

    def _abandon(self) -> None:
        """Force a timeout loop until the player falls."""
        engine = self.engine
        while not engine.is_over:
            engine.tick(engine.countdown.remaining)


class BatchRunner:
    """Runs many seeded battles, optionally in parallel.

    Parameters
    ----------
    payload:
        The quiz every battle is fought over.
    agent_config:
        Keyword arguments for :class:`RandomAgent` (``accuracy``,
        ``timeout_chance``, ``use_potions``).
    rules:
        Balance rules shared by every battle.
    """

    def __init__(
        self,
        payload: QuizPayload,
        agent_config: dict[str, Any] | None = None,
        rules: BattleRules | None = None,
    ) -> None:
        self.payload = payload
        self.agent_config = agent_config or {}
        self.rules = rules

    def run_batch(
        self,
        n_runs: int,
        passive: PassivePerk | None = None,
        base_seed: int = 42,
        parallel: bool = False,
    ) -> list[AttemptSummary]:
        """Run *n_runs* battles with seeds ``base_seed .. base_seed + n - 1``."""
        seeds = [base_seed + i for i in range(n_runs)]
        work_items = [
            (self.payload, self.agent_config, self.rules, passive, seed)
            for seed in seeds
        ]

        if parallel and n_runs > 1:
            n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)
            with multiprocessing.Pool(processes=n_workers) as pool:
                return pool.map(_worker_run_single, work_items)

        return [_worker_run_single(item) for item in work_items]


def run_single_battle(
    payload: QuizPayload,
    seed: int,
    passive: PassivePerk | None = None,
    agent_config: dict[str, Any] | None = None,
    rules: BattleRules | None = None,
) -> AttemptSummary:
    """Play one battle with a :class:`RandomAgent` seeded from *seed*."""
    rng = GameRNG(seed)
    agent = RandomAgent(rng=rng.fork("agent"), **(agent_config or {}))
    engine = BattleEngine(payload, rules=rules, rng=rng.fork("combat"))
    return BattleSimulator(engine, agent).run(passive=passive, nickname=f"sim-{seed}")


def _worker_run_single(
    args: tuple[QuizPayload, dict[str, Any], BattleRules | None, PassivePerk | None, int],
) -> AttemptSummary:
    """Top-level worker so multiprocessing can pickle it."""
    payload, agent_config, rules, passive, seed = args
    return run_single_battle(payload, seed, passive, agent_config, rules)
