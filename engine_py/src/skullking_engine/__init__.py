"""
Skull King scorekeeping engine.
"""
