"""nekofetch: system facts next to a cat."""

__version__ = "0.2.0"
