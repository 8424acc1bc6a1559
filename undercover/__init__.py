"""
Undercover: a pass-the-device party game facilitator.
"""
