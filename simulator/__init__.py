"""
Source root of the encounter simulator.

The packages below are imported flat (``from combat import Enemy``): combat
holds the combatants and enemy modifiers, character the playable hero, items
the weapons and armor, equipment the per-class chests and their facade,
persistence the player profiles, and core the shared infrastructure.
"""
