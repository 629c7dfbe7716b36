"""
Standard Trie (character-per-edge) with lazy children and pruning deletes.

This module provides a compact in-memory prefix tree for `str` keys.
Key design choices:
- **Memory efficiency:** `TrieNode` uses `__slots__` and *lazy* child dicts (`children=None`
  until the first child is added, and back to `None` when the last child is pruned).
- **Exact keys:** Words are stored character for character. No case folding or Unicode
  normalization is applied, so "Apple" and "apple" are different words.
- **Pruning deletes:** Removing a word unmarks its terminal node and then prunes the
  now-dead branch bottom-up, stopping at the first node that is terminal or still has
  other children. A childless, non-terminal node never outlives a delete.
- **Iterative traversals:** All traversals are iterative (no recursion), avoiding
  Python recursion limits on very long keys.


Classes
-------
TrieNode
    Minimal node holding `children` (dict[str, TrieNode] or None) and `is_terminal`.
Trie
    Public API for insert, delete, membership, prefix enumeration, and structural stats.


Complexity (typical)
--------------------
- single insert / delete / contains: O(L)
- batch insert / delete: ~O(total characters touched); shared prefixes between
  adjacent inputs are not re-walked
- enumerate prefix: O(L + K · avg_suffix_length), where K is number of results yielded


Conventions & Notes
-------------------
- **Absent words are not errors:** lookups return `False` / `None`, deletes return `False`.
  Only a non-`str` word raises (`TypeError`).
- **Children:** `children` is `None` for leaves. Always guard with `if node.children: ...`.
- **Enumeration order:** Follows child insertion order. It is not part of the contract;
  compare results as sets.
- **Empty string:** `""` is represented by `root.is_terminal`; enumeration yields `""`
  when it is stored.
- **Threads:** No internal locking. Wrap mutating calls in your own lock if the trie is
  shared between threads.
"""

from typing import Dict, Iterable, Iterator, List, Optional


def _check_word(word):
  if not isinstance(word, str):
    raise TypeError(f"trie keys must be str, got {type(word).__name__}")
  return word


def _lcp(a, b):
  """Return the length of the Longest Common Prefix between a and b."""
  i = 0
  n = min(len(a), len(b))
  while i < n and a[i] == b[i]:
    i += 1
  return i


class TrieNode:
  __slots__ = ("children", "is_terminal")

  def __init__(self):
    self.children = None
    self.is_terminal = False

  def __repr__(self):
    keys = "" if not self.children else "".join(self.children)
    return f"TrieNode(children={keys!r}, is_terminal={self.is_terminal})"


class Trie:
  __slots__ = ("root", )

  def __init__(self, words: Optional[Iterable[str]] = None):
    self.root = TrieNode()
    if words is not None:
      self.batch_insert(words)

  def single_insert(self, word: str) -> None:
    """Insert a single word into the trie.

    Parameters
    ----------
    word : str
        Word to insert. `""` marks the root as terminal.

    Notes
    -----
    - Lazily creates the `children` dict only when a node gets its first child.
    - Idempotent: inserting a stored word again changes nothing.

    Complexity
    ----------
    O(L) time, O(new_nodes) space where L = len(word).
    """
    word = _check_word(word)
    node = self.root

    for ch in word:
      children = node.children
      nxt = None if children is None else children.get(ch)
      if nxt is None:
        nxt = TrieNode()
        if children is None:
          node.children = {ch: nxt}
        else:
          children[ch] = nxt
      node = nxt
    node.is_terminal = True

  def batch_insert(self, words: Iterable[str]) -> None:
    """Insert many words, in the given order.

    The result is identical to calling `single_insert` once per word. The walk
    for each word resumes from the Longest Common Prefix (LCP) it shares with
    the previous word instead of restarting at the root, so sorted or
    prefix-clustered input is cheaper.

    Complexity
    ----------
    ~O(total new characters created + total characters not shared with the
    previous word).
    """
    prev = ""
    path = [self.root]

    for w in words:
      w = _check_word(w)
      i = _lcp(prev, w)

      del path[i + 1:]
      node = path[-1]

      for ch in w[i:]:
        children = node.children
        nxt = None if children is None else children.get(ch)

        if nxt is None:
          nxt = TrieNode()
          if children is None:
            node.children = {ch: nxt}
          else:
            children[ch] = nxt

        path.append(nxt)
        node = nxt

      node.is_terminal = True
      prev = w

  def single_delete(self, word: str) -> bool:
    """Delete a single word from the trie.

    Returns
    -------
    bool
        True if `word` was stored and has been removed; False if it was never
        stored (missing path, or the path exists only as a prefix of other words).
        Nothing is mutated when False is returned.
    """
    word = _check_word(word)
    return self._delete_along([self.root], [""], word, 0)

  def batch_delete(self, words: Iterable[str]) -> Dict[str, bool]:
    """Delete many words, in the given order.

    Each word is deleted exactly as `single_delete` would. Pruning caused by
    one word is visible to the next; the cached descent path is cut back to
    the deepest surviving node so pruned nodes are never revisited.

    Returns
    -------
    dict[str, bool]
        Outcome per word. A word listed twice keeps its *last* outcome (the
        second attempt finds nothing to delete and records False).

    Complexity
    ----------
    ~O(total characters touched) across all words, plus pruning.
    """
    result = {}
    prev = ""
    path_nodes = [self.root]
    path_edges = [""]

    for w in words:
      w = _check_word(w)
      i = _lcp(prev, w)

      del path_nodes[i + 1:]
      del path_edges[i + 1:]

      result[w] = self._delete_along(path_nodes, path_edges, w, i)
      # path now ends at the deepest node still attached to the tree
      prev = w[:len(path_nodes) - 1]
    return result

  def _delete_along(self, path_nodes, path_edges, word, start):
    """Descend from `path_nodes[-1]` (depth `start`) along `word`, unmark, and prune.

    `path_nodes[d]` is the node at depth d and `path_edges[d]` the character
    leading into it. Both lists are extended in place during the descent and
    truncated in place as nodes are pruned, so on return they describe the
    deepest node of the walk that is still reachable from the root.
    """
    node = path_nodes[-1]
    for ch in word[start:]:
      children = node.children
      if children is None or ch not in children:
        return False
      node = children[ch]
      path_nodes.append(node)
      path_edges.append(ch)

    if not node.is_terminal:
      return False
    node.is_terminal = False

    idx = len(path_nodes) - 1
    while idx > 0:
      cur = path_nodes[idx]
      if cur.is_terminal or cur.children:
        break

      parent = path_nodes[idx - 1]
      parent.children.pop(path_edges[idx], None)
      if not parent.children:
        parent.children = None
      path_nodes.pop()
      path_edges.pop()
      idx -= 1
    return True

  def prefix_search(self, prefix: str) -> Optional[TrieNode]:
    """Return the node at the end of `prefix`, or None if the path is missing.

    Returns
    -------
    TrieNode | None
        Node corresponding to the full prefix (may be terminal or not), else None.

    Complexity
    ----------
    O(L) where L = len(prefix).
    """
    prefix = _check_word(prefix)
    node = self.root
    for ch in prefix:
      node = None if node.children is None else node.children.get(ch)
      if node is None:
        return None
    return node

  def search(self, word: str) -> Optional[TrieNode]:
    """Return the terminal node for `word` if present, else None.
    """
    node = self.prefix_search(word)
    return node if node is not None and node.is_terminal else None

  def contains(self, word: str) -> bool:
    """True iff `word` was inserted and not deleted since."""
    return self.search(word) is not None

  def __contains__(self, word):
    return isinstance(word, str) and self.contains(word)

  def enumerate_prefix(self, prefix: str, k: Optional[int] = None) -> Iterator[str]:
    """Yield stored words that start with `prefix` using an iterative DFS.

    Parameters
    ----------
    prefix : str
        The prefix to enumerate from. Use "" to export the entire trie.
    k : int | None, default=None
        If None, yield all matches; otherwise, yield up to `k` matches.

    Yields
    ------
    str
        Words found under the prefix.

    Implementation details
    ----------------------
    - Uses a shared mutable character buffer to minimize intermediate string
      allocations; only joins to a Python string at yield time.
    - Traversal order follows child insertion order.
    """
    node = self.prefix_search(prefix)
    if node is None:
      return
    if k is not None and k <= 0:
      return

    yielded = 0
    buf = list(prefix)

    def child_iter(n):
      if not n.children:
        return iter(())
      return iter(n.children)

    if node.is_terminal:
      yield "".join(buf)
      yielded += 1
      if k is not None and yielded >= k:
        return

    stack = [(node, child_iter(node), len(buf))]

    while stack:
      n, it, depth = stack[-1]
      ch = next(it, None)
      if ch is None:
        stack.pop()
        del buf[depth:]
        continue
      child = n.children[ch]
      buf.append(ch)
      if child.is_terminal:
        yield "".join(buf)
        yielded += 1
        if k is not None and yielded >= k:
          return
      # depth is where buf is cut back to once child's subtree is exhausted
      stack.append((child, child_iter(child), len(buf) - 1))

  def get_all_words(self) -> List[str]:
    """Every stored word. Order is unspecified; compare as a set."""
    return list(self.enumerate_prefix(""))

  def __iter__(self):
    return self.enumerate_prefix("")

  def __len__(self):
    count = 0
    stack = [self.root]
    while stack:
      node = stack.pop()
      if node.is_terminal:
        count += 1
      if node.children:
        stack.extend(node.children.values())
    return count

  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If False, return the total node count (root included).
        If True, return average out-degree over internal nodes only:
        `sum(len(children)) / (# internal nodes)`.

    Returns
    -------
    int | float
        Total nodes (int) or average branching factor (float, 0.0 for an empty trie).

    Complexity
    ----------
    O(#nodes) time, O(depth) extra space.
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      children = node.children
      if children:
        total_deg += len(children)
        internal += 1
        stack.extend(children.values())
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes
