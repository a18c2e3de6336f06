"""Fitness Frog web application."""
