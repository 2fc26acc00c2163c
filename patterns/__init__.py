"""Reusable patterns for building retail verticals.

Each module demonstrates a self-contained pattern that can be adapted
to any domain: price rule composition, repository layers, and domain
configuration.
"""
