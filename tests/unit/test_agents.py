"""
Unit tests for the automated players.
"""
import numpy as np
from minefield.agents import BaseAgent, RandomAgent


class TestRandomAgent:
    """Test the random baseline."""

    def test_selects_only_hidden_cells(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        obs = np.array([[0, -1], [-2, 1]], dtype=np.int8)
        for _ in range(20):
            assert agent.select_action(obs) == 1

    def test_uses_given_mask(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        obs = np.full((2, 2), -1, dtype=np.int8)
        mask = np.array([False, False, True, False])
        assert agent.select_action(obs, mask) == 2

    def test_no_valid_action_returns_zero(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        obs = np.zeros((2, 2), dtype=np.int8)
        assert agent.select_action(obs) == 0

    def test_same_seed_same_choices(self) -> None:
        obs = np.full((4, 4), -1, dtype=np.int8)
        first = RandomAgent(4, 4, seed=7)
        second = RandomAgent(4, 4, seed=7)
        assert [first.select_action(obs) for _ in range(10)] == [
            second.select_action(obs) for _ in range(10)
        ]


class TestBaseAgent:
    """Test the shared helpers."""

    def test_action_to_position(self) -> None:
        agent = RandomAgent(8, 10)
        assert agent.action_to_position(23) == (2, 3)
        assert agent.action_to_position(79) == (7, 9)

    def test_mask_from_observation(self) -> None:
        agent = RandomAgent(2, 2)
        obs = np.array([[-1, 3], [-2, -1]], dtype=np.int8)
        assert agent.get_valid_actions_from_obs(obs).tolist() == [
            True, False, False, True,
        ]

    def test_random_agent_is_a_base_agent(self) -> None:
        assert isinstance(RandomAgent(), BaseAgent)
