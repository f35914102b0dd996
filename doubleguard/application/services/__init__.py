"""Application services for doubleguard.

One class per file.
"""

from .handler_chain_manager import HandlerChainManager

__all__ = [
    "HandlerChainManager",
]
