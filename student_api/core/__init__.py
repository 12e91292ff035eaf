"""
Core module - configuration, logging and error mapping.
"""
