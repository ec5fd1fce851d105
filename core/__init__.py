"""core package initialization.

Making `core` an explicit package so imports like `import core.save`
work reliably when running `main.py` from the project root.
"""

__all__ = ["app", "scene", "tuning", "constants", "clock",
           "record", "codec", "cipher", "save"]
