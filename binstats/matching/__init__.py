"""
Symbol name filtering with the binstats wildcard dialect.
"""
from .wildcard import matches, has_wildcards, name_matches, WILDCARDS

__all__ = ['matches', 'has_wildcards', 'name_matches', 'WILDCARDS']
