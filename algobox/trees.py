"""Binary tree and graph algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass(eq=False)
class GraphNode:
    """A node of an undirected graph with an adjacency list."""

    val: int = 0
    neighbors: List["GraphNode"] = field(default_factory=list, repr=False)


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a binary tree from level-order values, ``None`` marking a gap."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


class _Cover(Enum):
    NEEDS_COVER = auto()
    COVERED = auto()
    HAS_CAMERA = auto()


def min_camera_cover(root: Optional[TreeNode]) -> int:
    """Return the fewest cameras that watch every node of the tree."""
    cameras = 0

    def visit(node: Optional[TreeNode]) -> _Cover:
        nonlocal cameras
        if node is None:
            return _Cover.COVERED
        states = (visit(node.left), visit(node.right))
        if _Cover.NEEDS_COVER in states:
            cameras += 1
            return _Cover.HAS_CAMERA
        if _Cover.HAS_CAMERA in states:
            return _Cover.COVERED
        return _Cover.NEEDS_COVER

    if visit(root) is _Cover.NEEDS_COVER:
        cameras += 1
    return cameras


def level_order(root: Optional[TreeNode]) -> List[List[int]]:
    """Return the node values level by level, left to right."""
    if root is None:
        return []
    levels = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)
        levels.append(level)
    return levels


def path_sum(root: Optional[TreeNode], target_sum: int) -> List[List[int]]:
    """Return every root-to-leaf path whose values add up to ``target_sum``."""
    paths: List[List[int]] = []

    def walk(node: Optional[TreeNode], remaining: int, prefix: List[int]) -> None:
        if node is None:
            return
        path = prefix + [node.val]
        if node.left is None and node.right is None and remaining == node.val:
            paths.append(path)
        walk(node.left, remaining - node.val, path)
        walk(node.right, remaining - node.val, path)

    walk(root, target_sum, [])
    return paths


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of any non-empty path in the tree."""
    if root is None:
        raise ValueError("the tree is empty")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def binary_tree_paths(root: Optional[TreeNode]) -> List[str]:
    """Return every root-to-leaf path written as ``a->b->c``."""
    paths: List[str] = []

    def walk(node: Optional[TreeNode], prefix: str) -> None:
        if node is None:
            return
        if node.left is None and node.right is None:
            paths.append(prefix + str(node.val))
        extended = f"{prefix}{node.val}->"
        walk(node.left, extended)
        walk(node.right, extended)

    walk(root, "")
    return paths


def rob(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values with no two chosen nodes adjacent."""

    def best(node: Optional[TreeNode]) -> tuple[int, int]:
        # (best when the node may be taken, best when it must be skipped)
        if node is None:
            return 0, 0
        left_free, left_skip = best(node.left)
        right_free, right_skip = best(node.right)
        skipped = left_free + right_free
        taken = node.val + left_skip + right_skip
        return max(taken, skipped), skipped

    return best(root)[0]


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Return a deep copy of the connected graph reachable from ``node``."""
    if node is None:
        return None
    clones = {node: GraphNode(node.val)}
    pending = [node]
    while pending:
        original = pending.pop()
        copy = clones[original]
        for neighbor in original.neighbors:
            if neighbor not in clones:
                clones[neighbor] = GraphNode(neighbor.val)
                pending.append(neighbor)
            copy.neighbors.append(clones[neighbor])
    return clones[node]