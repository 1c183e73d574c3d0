"""Kernel – errors, time and messaging primitives shared by every layer."""
