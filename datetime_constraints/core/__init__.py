"""
Core rule set, validators, rule engine and models.
"""
