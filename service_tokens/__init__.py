"""
Token service package for the Access Layer.
"""
