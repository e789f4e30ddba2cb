"""Core type definitions for pixelgarden."""

type Copy[T] = T
"""Type alias indicating a value is a copy that won't write back.

When you see `Copy[T]` in a return type, the returned value is detached from
engine state. Mutating it does NOT affect the garden or the engine. To change
state, issue a command on the engine (purchase, level up, sell, ...).
"""
