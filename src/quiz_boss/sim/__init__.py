"""Headless battle simulation: state machine, turn math, agents and runners."""
