"""
Terminal reporting for CLI commands.

Modules
-------
formatters : Pure string formatters for recommendations, filters,
             the eligibility matrix and catalog entries.
"""
