"""
binstats - symbol size statistics from nm output.
"""
