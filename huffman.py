import heapq
from itertools import count
from typing import Self

from count_chars import SUBJECT
from counter import CharStats


class HuffmanNode(object):
    def __init__(
        self,
        weight: int,
        char: str = None,
        left: Self = None,
        right: Self = None,
    ):
        self.weight = weight
        self.char: str = char  # Only set for leaves
        self.left: Self = left
        self.right: Self = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"Leaf({self.char!r}, {self.weight})"
        return f"Node({self.weight}, {self.left}, {self.right})"


def build_tree(table: dict[str, int]) -> HuffmanNode:
    """Build a Huffman tree for a frequency table.

    Nodes of equal weight are merged in the order they were created, leaves
    in the table's order first, so the same table always gives the same tree.
    Returns None for an empty table.
    """
    order = count()
    heap = []
    for char, weight in table.items():
        if weight <= 0:
            raise ValueError(f"Weight of {char!r} must be positive, got {weight}")
        heapq.heappush(heap, (weight, next(order), HuffmanNode(weight, char)))

    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)
        weight = left_weight + right_weight
        node = HuffmanNode(weight, left=left, right=right)
        heapq.heappush(heap, (weight, next(order), node))

    if not heap:
        return None
    return heap[0][2]


def generate_codes(tree: HuffmanNode) -> dict[str, str]:
    if tree is None:
        return {}
    if tree.is_leaf:
        return {tree.char: "0"}

    codes = {}

    def walk(node: HuffmanNode, prefix: str):
        if node.is_leaf:
            codes[node.char] = prefix
        else:
            walk(node.left, prefix + "0")
            walk(node.right, prefix + "1")

    walk(tree, "")
    return dict(sorted(codes.items()))


def encode_text(text: str, codes: dict[str, str]) -> str:
    return "".join(codes[char] for char in text)


def decode_text(bits: str, tree: HuffmanNode) -> str:
    if not bits:
        return ""
    if tree is None:
        raise ValueError("Cannot decode bits without a tree")

    chars = []
    if tree.is_leaf:
        for bit in bits:
            if bit != "0":
                raise ValueError(f"Invalid bit {bit!r} for a single-symbol code")
            chars.append(tree.char)
        return "".join(chars)

    node = tree
    for bit in bits:
        if bit == "0":
            node = node.left
        elif bit == "1":
            node = node.right
        else:
            raise ValueError(f"Invalid bit {bit!r}")
        if node.is_leaf:
            chars.append(node.char)
            node = tree

    if node is not tree:
        raise ValueError("Bit string ends in the middle of a code")
    return "".join(chars)


POWERS2 = [128, 64, 32, 16, 8, 4, 2, 1]


def pack_bits(bits: str) -> bytes:
    """Pack a string of '0' and '1' into bytes, most significant bit first.

    The last byte is padded with zero bits.
    """
    packed = bytearray((len(bits) + 7) // 8)
    for i, bit in enumerate(bits):
        if bit == "1":
            packed[i // 8] |= POWERS2[i % 8]
        elif bit != "0":
            raise ValueError(f"Invalid bit {bit!r} at position {i}")
    return bytes(packed)


def unpack_bits(data: bytes, nbits: int = None) -> str:
    bits = []
    for byte in data:
        for digit in POWERS2:
            bits.append("1" if byte & digit else "0")
    if nbits is not None:
        if nbits < 0 or nbits > len(bits):
            raise ValueError(f"Requested {nbits} bits, only {len(bits)} available")
        del bits[nbits:]
    return "".join(bits)


def report_codes(text: str):
    stats = CharStats().count_text(text)
    tree = build_tree(stats.table)
    codes = generate_codes(tree)
    for char, code in codes.items():
        print(repr(char), stats.table[char], code)
    encoded = encode_text(text, codes)
    print(f"Encoded {len(text)} characters into {len(encoded)} bits "
          f"({len(pack_bits(encoded))} bytes)")


if __name__ == "__main__":
    report_codes(SUBJECT)
