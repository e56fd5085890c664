"""
Receipt intake, storage, and points scoring.
"""
