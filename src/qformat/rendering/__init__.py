"""Rendering layer: numeric backend, value renderer and template engine."""
