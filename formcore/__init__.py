"""formcore: validation and state synchronization for the profile and payment forms."""

__version__ = "0.1.0"
