"""A self-playing snake game driven by a Q-learning agent, recording its boards to text files."""

__version__ = "0.1.0"