"""Implementation package for earclip; import public names from ``earclip``."""
