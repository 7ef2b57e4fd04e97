"""Node interning for expression trees."""

from .node_cache import NodeCache, get_global_cache, clear_global_cache

__all__ = ['NodeCache', 'get_global_cache', 'clear_global_cache']
