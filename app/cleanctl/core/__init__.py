"""Core configuration layer for cleanctl.

Rule loading and validation, XDG paths and console theming.
"""
