"""
Core infrastructure for Quire: exceptions, logging, paths and configuration.
"""
