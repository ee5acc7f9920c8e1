"""Scenarios that drive the bank through a fixed sequence of operations."""

from bank_demo.scenarios.scripted import ScenarioResult, ScriptedScenario

__all__ = ["ScenarioResult", "ScriptedScenario"]
