"""Play agent implementations for headless battle simulation.

Re-exports the base class and all concrete agent implementations so
consumers can do::

    from quiz_boss.sim.play_agents import QuizAgent, RandomAgent
"""

from .base import QuizAgent
from .random_agent import RandomAgent, correct_answer

__all__ = ["QuizAgent", "RandomAgent", "correct_answer"]
