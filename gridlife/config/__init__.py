"""Configuration package for the GridLife simulation.

Constants are split by concern (instructions, board, display) and the
run parameters live in :mod:`gridlife.config.parameters`.
"""
