"""AVL-balanced ordered map keyed by numeric positions."""

from collections.abc import Iterator

Number = int | float


class MapNode:
    """A single key/value entry of the ordered map.

    Attributes:
        key: Position on the axis; unique within a map.
        value: Value stored for the key.
        height: Cached height of the subtree rooted here, at least 1.
        left: Subtree with strictly smaller keys.
        right: Subtree with strictly greater keys.
    """

    __slots__ = ["key", "value", "height", "left", "right"]

    def __init__(self, key: Number, value: Number):
        self.key: Number = key
        self.value: Number = value
        self.height: int = 1
        self.left: MapNode | None = None
        self.right: MapNode | None = None

    def __repr__(self) -> str:
        return f"MapNode(key={self.key!r}, value={self.value!r})"


class OrderedMap:
    """Self-balancing binary search tree mapping numeric keys to values."""

    def __init__(self):
        self.root: MapNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Number) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[Number]:
        for key, _ in self.in_order_traversal():
            yield key

    @property
    def height(self) -> int:
        """Height of the whole tree, 0 when empty."""
        return _height(self.root)

    # --- Mutation ---

    def insert(self, key: Number, value: Number) -> None:
        """Insert a key, or overwrite its value when already present.

        Args:
            key: Position to insert.
            value: Value to store at the position.
        """
        self.root = self._insert_node(self.root, key, value)

    def update(self, key: Number, value: Number) -> None:
        """Overwrite the value of an existing key; absent keys are ignored.

        Args:
            key: Position to update.
            value: New value for the position.
        """
        node = self.find(key)
        if node is not None:
            node.value = value

    def remove(self, key: Number) -> None:
        """Delete a key if present.

        Args:
            key: Position to delete.
        """
        self.root = self._remove_node(self.root, key)

    # --- Lookup ---

    def find(self, key: Number) -> MapNode | None:
        """Return the node stored at exactly ``key``.

        Args:
            key: Position to look up.

        Returns:
            The matching node, or None when the key is absent.
        """
        node = self.root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def find_less_than(self, key: Number) -> MapNode | None:
        """Return the node with the largest key strictly less than ``key``.

        Args:
            key: Reference position.

        Returns:
            The strict predecessor node, or None when there is none.
        """
        return self._find_less_than(self.root, key, None)

    def find_less_than_or_equal(self, key: Number) -> MapNode | None:
        """Return the exact match for ``key`` or else its strict predecessor.

        Args:
            key: Reference position.

        Returns:
            The floor node, or None when every stored key is greater.
        """
        exact = self.find(key)
        if exact is not None:
            return exact
        return self.find_less_than(key)

    def find_greater_than(self, key: Number) -> MapNode | None:
        """Return the node with the smallest key strictly greater than ``key``.

        Args:
            key: Reference position.

        Returns:
            The strict successor node, or None when there is none.
        """
        return self._find_greater_than(self.root, key, None)

    def find_nearest(self, key: Number) -> MapNode | None:
        """Return the node whose key is numerically closest to ``key``.

        An exact match wins. Otherwise the predecessor and successor are
        compared by distance; on a tie the predecessor (lesser key) wins.

        Args:
            key: Reference position.

        Returns:
            The nearest node, or None when the map is empty.
        """
        exact = self.find(key)
        if exact is not None:
            return exact

        less = self.find_less_than(key)
        greater = self.find_greater_than(key)
        if less is None:
            return greater
        if greater is None:
            return less
        return less if key - less.key <= greater.key - key else greater

    def get_keys_in_range(self, from_key: Number, to_key: Number) -> list[Number]:
        """Collect every key ``k`` with ``from_key <= k <= to_key``.

        Args:
            from_key: Inclusive lower bound.
            to_key: Inclusive upper bound.

        Returns:
            Matching keys in increasing order.
        """
        result: list[Number] = []
        self._collect_keys_in_range(self.root, from_key, to_key, result)
        return result

    def in_order_traversal(self) -> list[tuple[Number, Number]]:
        """Return all ``(key, value)`` pairs in increasing key order."""
        result: list[tuple[Number, Number]] = []
        self._in_order(self.root, result)
        return result

    # --- Debug Tool ---

    def verify_integrity(self) -> None:
        """Raise RuntimeError if ordering, height or AVL balance is violated."""

        def _walk(node, low, high):
            if node is None:
                return 0, 0
            if (low is not None and node.key <= low) or (
                high is not None and node.key >= high
            ):
                raise RuntimeError(f"Order violation at {node.key}")

            left_h, left_n = _walk(node.left, low, node.key)
            right_h, right_n = _walk(node.right, node.key, high)

            if abs(left_h - right_h) > 1:
                raise RuntimeError(f"AVL violation at {node.key}")
            if node.height != 1 + max(left_h, right_h):
                raise RuntimeError(f"Height violation at {node.key}")
            return node.height, 1 + left_n + right_n

        _, count = _walk(self.root, None, None)
        if count != self._size:
            raise RuntimeError(f"Size violation: counted {count}, tracked {self._size}")

    # --- Internal Utilities ---

    def _insert_node(self, node: MapNode | None, key: Number, value: Number) -> MapNode:
        if node is None:
            self._size += 1
            return MapNode(key, value)

        if key < node.key:
            node.left = self._insert_node(node.left, key, value)
        elif key > node.key:
            node.right = self._insert_node(node.right, key, value)
        else:
            node.value = value
            return node

        _update_height(node)
        return _balance(node)

    def _remove_node(self, node: MapNode | None, key: Number) -> MapNode | None:
        if node is None:
            return None

        if key < node.key:
            node.left = self._remove_node(node.left, key)
        elif key > node.key:
            node.right = self._remove_node(node.right, key)
        elif node.left is None or node.right is None:
            self._size -= 1
            return node.left or node.right
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            node.right = self._remove_node(node.right, successor.key)

        _update_height(node)
        return _balance(node)

    def _find_less_than(
        self, node: MapNode | None, key: Number, best: MapNode | None
    ) -> MapNode | None:
        while node is not None:
            if node.key >= key:
                node = node.left
            else:
                best = node
                node = node.right
        return best

    def _find_greater_than(
        self, node: MapNode | None, key: Number, best: MapNode | None
    ) -> MapNode | None:
        while node is not None:
            if node.key <= key:
                node = node.right
            else:
                best = node
                node = node.left
        return best

    def _collect_keys_in_range(
        self, node: MapNode | None, from_key: Number, to_key: Number, result: list
    ) -> None:
        if node is None:
            return
        if from_key < node.key:
            self._collect_keys_in_range(node.left, from_key, to_key, result)
        if from_key <= node.key <= to_key:
            result.append(node.key)
        if to_key > node.key:
            self._collect_keys_in_range(node.right, from_key, to_key, result)

    def _in_order(self, node: MapNode | None, result: list) -> None:
        if node is None:
            return
        self._in_order(node.left, result)
        result.append((node.key, node.value))
        self._in_order(node.right, result)


def _height(node: MapNode | None) -> int:
    return node.height if node else 0


def _balance_factor(node: MapNode | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update_height(node: MapNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: MapNode) -> MapNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: MapNode) -> MapNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _balance(node: MapNode) -> MapNode:
    """Restore the AVL property at ``node`` and return the new subtree root."""
    balance = _balance_factor(node)
    if balance > 1:
        # left-right case
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node
