"""Application layer for doubleguard.

Owns the process-wide handler chain and the public activation entry
points built on it.
"""
