"""
Utility helpers shared by all modules: structured logging and clock helpers.
"""
