"""simulation — The marimo's world, independent of any window.

Submodules
----------
tiers       Tier, TIERS — the habitat capacity ladder
habitat     Habitat — water decay, cleaning, tier upgrades
organism    Organism — growth clamped by the habitat, draw animation
growth      reconcile() — water/growth catch-up for one elapsed interval
easing      Easing curves and smoothing for the cosmetic animations
game        MarimoGame — owns everything plus the save file; RenderSnapshot
"""
