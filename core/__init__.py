"""Clause interpreter, plan executor and shared helpers for the watch-list."""
