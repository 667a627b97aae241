"""
Constants and default values for model conversions.

Centralizes the fallbacks used when a FogBugz response omits a field.
"""

EMPTY_STRING = ""

FOGBUGZ_DEFAULT_ID = "0"
