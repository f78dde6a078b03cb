"""Recursive geometry for classic fractals, emitted as ordered draw commands."""
