"""Boss-battle engine for classroom quizzes.

A class answers quiz questions to damage a boss that counter-attacks on
every miss.  The content schema lives in :mod:`quiz_boss.content`, the
battle simulation in :mod:`quiz_boss.sim`, and batch balance analysis in
:mod:`quiz_boss.balance`.
"""
