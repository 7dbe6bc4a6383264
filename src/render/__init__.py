"""Immediate-mode GL drawing for the rail yard."""
