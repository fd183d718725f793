"""
Radix Set: a compressed prefix tree holding a multiset of strings.

Edges carry whole substrings ("labels") instead of single characters, and a
node that is neither terminal nor a branching point is folded into its
parent edge. Every node is itself a `RadixSet`; the object you construct is
simply the root node, and the empty string is stored in the root's `count`.

Key features
------------
- **Multiset semantics**
  - `insert` increments the multiplicity of a string, `remove` takes one
    occurrence away, `contains_at_least(s, n)` tests multiplicity.
- **Two lookup strategies**
  - *substring probe*: when the remaining query is shorter than the number of
    children, probe `s[:i]` (longest first) as exact labels.
  - *scan*: walk all labels and take the one that prefixes the query.
  - `RadixSet` probes, `ScanRadixSet` always scans. Both give identical
    answers, which the test-suite checks by running one against the other.
- **Caller-side pruning**
  - `remove` unwinds its path and the parent, not the child, detaches
    emptied children and coalesces intermediate nodes left with one child.
- **Shape-independent merge**
  - `merge(other)` re-inserts every stored string of `other` with its
    multiplicity, so trees built in different orders merge correctly.

Conventions & invariants
------------------------
- No two sibling labels share a non-empty common prefix.
- Every non-root node is terminal (`count > 0`) or has children.
- `children` is `None` until the first child is attached.
- Keys are `str` or `bytes`, compared element-wise; do not mix the two in
  one set.
- All traversals are iterative.
"""

import enum
import logging


logger = logging.getLogger(__name__)


def _lcp(a, b):
  """Return the length of the Longest Common Prefix between a and b."""
  if a == b:
    return len(a)
  i = 0
  n = min(len(a), len(b))
  while i < n and a[i] == b[i]:
    i += 1
  return i


class _Outcome(enum.Enum):
  NO_MATCH = 0
  ALIVE = 1
  EMPTIED = 2


class RadixSet:
  __slots__ = ("children", "count")

  # Probe exact substrings of short queries before scanning all children.
  probe_substrings = True

  def __init__(self, count=0):
    self.children = None
    self.count = count


  def empty(self):
    return not self.children and self.count == 0


  def _attach(self, label, child):
    if self.children is None:
      self.children = {}
    self.children[label] = child
    return child


  def _detach(self, label):
    del self.children[label]
    if not self.children:
      self.children = None


  def _edge_for(self, s):
    """Return (label, child) for the edge whose whole label prefixes s, else None.

    At most one sibling label can prefix `s`, so the first hit of either
    strategy is the only one.
    """
    children = self.children
    if not children:
      return None
    if self.probe_substrings and len(s) < len(children):
      for i in range(len(s), 0, -1):
        child = children.get(s[:i])
        if child is not None:
          return s[:i], child
      return None
    for label, child in children.items():
      if s[:len(label)] == label:
        return label, child
    return None


  def _branch_for(self, s):
    """Return (label, child, shared) for the edge sharing a prefix with s, else None.

    `shared` is the common-prefix length; it is shorter than the label when
    the edge has to be split.
    """
    children = self.children
    if not children:
      return None
    if self.probe_substrings and len(s) < len(children):
      for i in range(len(s), 0, -1):
        child = children.get(s[:i])
        if child is not None:
          return s[:i], child, i
      # a label longer than s may still share part of it
    for label, child in children.items():
      n = _lcp(label, s)
      if n > 0:
        return label, child, n
    return None


  def _find(self, s):
    node = self
    while s:
      hit = node._edge_for(s)
      if hit is None:
        return None
      label, node = hit
      s = s[len(label):]
    return node


  def multiplicity(self, s):
    """Return the number of net insertions of `s` (0 when absent)."""
    node = self._find(s)
    return 0 if node is None else node.count


  def contains(self, s):
    return self.contains_at_least(s, 1)


  def contains_at_least(self, s, n):
    """True iff `s` has been inserted at least `n` times net of removals."""
    return self.multiplicity(s) >= n


  def insert(self, s):
    """Increment the multiplicity of `s` and return its terminal node."""
    return self._insert(s, 1)


  def _insert(self, s, k):
    node = self
    while s:
      hit = node._branch_for(s)
      if hit is None:
        return node._attach(s, type(self)(k))

      label, child, n = hit
      if n < len(label):
        # Split: the shared part becomes a new intermediate node.
        mid = type(self)()
        mid._attach(label[n:], child)
        node._detach(label)
        node._attach(label[:n], mid)
        child = mid
      node = child
      s = s[n:]
    node.count += k
    return node


  def remove(self, s):
    """Remove one occurrence of `s`.

    Returns the node that held `s` when this removal took it out of the
    tree (emptied and detached, or folded into its parent edge), else None.
    An emptied root stays in place and is returned as well. Removing an
    absent string is a no-op.
    """
    frames = []
    node = self
    while s:
      hit = node._edge_for(s)
      if hit is None:
        return None
      label, child = hit
      frames.append((node, label))
      node = child
      s = s[len(label):]

    target = node
    outcome = target._decrement()
    if outcome is _Outcome.NO_MATCH:
      return None

    # Unwind: each parent edits its own children on behalf of the child.
    while frames:
      parent, label = frames.pop()
      if outcome is _Outcome.EMPTIED:
        parent._detach(label)
        outcome = _Outcome.EMPTIED if parent.empty() else _Outcome.ALIVE
        continue
      child = parent.children[label]
      if child.count == 0 and child.children and len(child.children) == 1:
        (tail, grand), = child.children.items()
        child.children = None
        parent._detach(label)
        parent._attach(label + tail, grand)
      break

    return target if target.empty() else None


  def _decrement(self):
    if self.count == 0:
      return _Outcome.NO_MATCH
    self.count -= 1
    return _Outcome.EMPTIED if self.empty() else _Outcome.ALIVE


  def _entries(self):
    """Yield (string, count) for every terminal node under this one."""
    stack = [(self, None)]
    while stack:
      node, path = stack.pop()
      if node.count:
        yield path or "", node.count
      if node.children:
        for label, child in node.children.items():
          stack.append((child, label if path is None else path + label))


  def merge(self, other):
    """Add every string of `other`, with its multiplicity, to this set.

    `other` is left untouched and no nodes are shared between the two sets.
    Merging `None` is a no-op.
    """
    if other is None:
      return
    # Snapshot first: other may be self.
    for s, k in list(other._entries()):
      self._insert(s, k)


  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes."""
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self]
    while stack:
      node = stack.pop()
      total_nodes += 1
      if node.children:
        total_deg += len(node.children)
        internal += 1
        stack.extend(node.children.values())
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes


  def debug(self):
    """Log one `depth / prefix / count` line per node."""
    stack = [(self, None, 0)]
    while stack:
      node, prefix, depth = stack.pop()
      logger.debug("depth %d: %r: %d", depth, prefix or "", node.count)
      if node.children:
        for label, child in node.children.items():
          path = label if prefix is None else prefix + label
          stack.append((child, path, depth + 1))



class ScanRadixSet(RadixSet):
  """RadixSet that always scans children; the reference for the probing path."""
  __slots__ = ()

  probe_substrings = False
