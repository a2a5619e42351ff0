"""
Core models, validators and rules of the schedule import.
"""
