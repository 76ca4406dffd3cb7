"""
Derived views over the loaded journal entries.
"""
