"""Fitness Frog backend package."""
