"""Infrastructure layer for doubleguard.

Holds the runtime type checker the forgiveness core plugs into.
"""
