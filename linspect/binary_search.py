"""Binary search helpers and boundary lookup over unix seconds."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, Optional


def binary_search_int64(nums: list[int], v: int) -> int:
    """Return the index of *v* in sorted *nums*, or -1 if it is absent."""
    position = bisect_left(nums, v)
    if position < len(nums) and nums[position] == v:
        return position
    return -1


@dataclass
class Float64Node:
    """Node of a binary search tree remembering its original index."""

    idx: int
    value: float
    left: Optional["Float64Node"] = None
    right: Optional["Float64Node"] = None


def insert(root: Optional[Float64Node], idx: int, v: float) -> Float64Node:
    """Insert *v* (from position *idx*) and return the tree's root."""
    node = Float64Node(idx, v)
    if root is None:
        return node
    current = root
    while True:
        if current.value > v:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def search(root: Optional[Float64Node], v: float) -> Optional[Float64Node]:
    """Return the node holding exactly *v*, or None."""
    current = root
    while current is not None:
        if current.value == v:
            return current
        current = current.left if current.value > v else current.right
    return None


def search_closest(root: Optional[Float64Node], v: float) -> Optional[Float64Node]:
    """Return the node on the search path whose value is closest to *v*."""
    path = []
    current = root
    while current is not None:
        path.append(current)
        current = current.left if current.value > v else current.right
    if not path:
        return None
    best = path[-1]
    for node in reversed(path[:-1]):
        if abs(node.value - v) < abs(best.value - v):
            best = node
    return best


class BinaryTree:
    """Binary search tree built from values in their given order."""

    def __init__(self, nums: Iterable[float]) -> None:
        self.root: Optional[Float64Node] = None
        for idx, value in enumerate(nums):
            self.root = insert(self.root, idx, float(value))

    def closest(self, v: float) -> tuple[int, float]:
        """Return the original index and value closest to *v*."""
        node = search_closest(self.root, v)
        if node is None:
            raise ValueError("tree is empty")
        return node.idx, node.value


@dataclass
class Boundary:
    """Nearest known values below and above a missing one, with indexes."""

    lower: int = 0
    lower_idx: int = 0
    upper: int = 0
    upper_idx: int = 0


class Boundaries:
    """Known unix seconds, searchable for the neighbours of a missing one."""

    def __init__(self, nums: Iterable[int]) -> None:
        self.nums_orig = list(nums)
        self.num_to_orig_idx = {num: idx for idx, num in enumerate(self.nums_orig)}
        self.tree = BinaryTree(self.nums_orig)
        self.nums_sorted = sorted(self.nums_orig)
        self.num_to_sorted_idx = {num: idx for idx, num in enumerate(self.nums_sorted)}

    def add(self, sec: int) -> None:
        """Add a second and rebuild the search structures."""
        self.nums_orig.append(sec)
        self.num_to_orig_idx[sec] = len(self.nums_orig)
        self.nums_sorted.append(sec)
        self.tree = BinaryTree(self.nums_sorted)
        self.nums_sorted.sort()
        self.num_to_sorted_idx = {num: idx for idx, num in enumerate(self.nums_sorted)}

    def find_boundary(self, missing_second: int) -> Boundary:
        """Return the closest lower and upper known seconds; -1 marks none."""
        idx, value = self.tree.closest(float(missing_second))
        found = int(value)
        if found == missing_second:
            return Boundary(found, idx, found, idx)

        sorted_idx = self.num_to_sorted_idx[found]
        if missing_second > found:
            upper = next(
                (n for n in self.nums_sorted[sorted_idx + 1 :] if n > missing_second),
                None,
            )
            if upper is None:
                return Boundary(lower=found, lower_idx=idx, upper=0, upper_idx=-1)
            return Boundary(found, idx, upper, self.num_to_orig_idx[upper])

        lower = next(
            (n for n in reversed(self.nums_sorted[:sorted_idx]) if n < missing_second),
            None,
        )
        if lower is None:
            return Boundary(lower=0, lower_idx=-1, upper=found, upper_idx=idx)
        return Boundary(lower, self.num_to_orig_idx[lower], found, idx)