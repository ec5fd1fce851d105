"""ui — Formatting and drawing helpers for the habitat window."""
