"""
Core building blocks: configuration, models, errors and session storage.
"""
