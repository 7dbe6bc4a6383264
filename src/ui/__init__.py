"""Screen-space text and HUD."""
