from typing import TYPE_CHECKING, Optional, Type
import threading
import weakref

from ...config import get_config
from ...logging_system import log_debug

if TYPE_CHECKING:
  from ..core.base import Node


class NodeCache:
  """Interning table so structurally identical nodes share one instance.

  Entries are weak: a node is dropped from the table as soon as its last
  holder releases it.
  """

  def __init__(self):
    self._nodes: 'weakref.WeakValueDictionary[tuple, Node]' = weakref.WeakValueDictionary()
    self._lock = threading.Lock()
    self.hits = 0
    self.misses = 0

  def intern(self, cls: Type['Node'], *parts) -> 'Node':
    """Return the live node of kind `cls` with these parts, building it if needed"""
    if not get_config().intern_nodes:
      return cls(*parts)

    key = (cls.type_code,) + parts
    with self._lock:
      node = self._nodes.get(key)
      if node is not None:
        self.hits += 1
        return node
      node = cls(*parts)
      self._nodes[key] = node
      self.misses += 1
      return node

  def __len__(self) -> int:
    return len(self._nodes)

  def get_stats(self) -> dict:
    """Get cache statistics"""
    return {
      'live_nodes': len(self._nodes),
      'hits': self.hits,
      'misses': self.misses,
    }

  def clear(self):
    """Forget all entries; live nodes stay valid but are no longer shared"""
    with self._lock:
      self._nodes.clear()
      self.hits = 0
      self.misses = 0


# Global instance - created on first use
_GLOBAL_CACHE: Optional[NodeCache] = None
_CACHE_LOCK = threading.Lock()


def get_global_cache() -> NodeCache:
  """Get the global node cache"""
  global _GLOBAL_CACHE

  if _GLOBAL_CACHE is not None:
    return _GLOBAL_CACHE

  with _CACHE_LOCK:
    if _GLOBAL_CACHE is None:
      _GLOBAL_CACHE = NodeCache()

  return _GLOBAL_CACHE


def clear_global_cache():
  """Clear the global node cache"""
  cache = get_global_cache()
  log_debug(f"Clearing node cache: {cache.get_stats()}")
  cache.clear()
