"""Validated point sets and synthetic point-cloud families."""
