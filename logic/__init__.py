"""logic — Input handling between pygame and the game.

Top-level modules
-----------------
input_manager   — raw input → intent mapping
"""
