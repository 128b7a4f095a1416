"""
User interface module for the encounter simulator.

This module provides the command-line menus the player answers when the
demo runs interactively.
"""
