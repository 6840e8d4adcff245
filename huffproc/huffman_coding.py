"""
Huffman coding algorithm -
frequency counting, tree construction
and code generation
"""

import heapq

from huffproc.bit_utils.bit_channel import NO_MORE_BITS, BitInputStream
from huffproc.huff_constants import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF


class Node:
    """
    Class object for Node in Huffman's Tree
    """

    def __init__(self, value: int, val_freq: int, left=None, right=None, order: int = 0):
        """
        Function initializes the structure of a node.

        :param value: symbol held by a leaf, 0 for internal nodes
        :param val_freq: int, the frequency in our data for this value
        :param left: left child, None for leaves
        :param right: right child, None for leaves
        :param order: int, arrival order used to break ties between equal frequencies
        """
        self.left = left
        self.right = right
        self.value = value
        self.val_freq = val_freq
        self.order = order

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):
        return (self.val_freq, self.order) < (other.val_freq, other.order)

    def __repr__(self):
        if self.is_leaf():
            return f"Node(value={self.value}, val_freq={self.val_freq})"
        return f"Node(val_freq={self.val_freq}, left={self.left!r}, right={self.right!r})"


def read_for_counts(in_stream: BitInputStream) -> list[int]:
    """
    Function counts how many times every 8-bit word occurs in the stream.
    The stream is read to its end, the caller has to reset it
    before reading the data again.

    :param in_stream: BitInputStream positioned at the start of the data
    :return: list of ALPH_SIZE + 1 counts, PSEUDO_EOF always counted once
    """
    freq = [0] * (ALPH_SIZE + 1)
    freq[PSEUDO_EOF] = 1

    while True:
        bits = in_stream.read_bits(BITS_PER_WORD)
        if bits == NO_MORE_BITS:
            break
        freq[bits] += 1

    return freq


class HuffmanTree:
    """
    Class object for Huffman Tree - main structure used
    in Huffman coding algorithm. Holds the root of the tree
    and the prefix codes derived from it.
    """

    def __init__(self):
        """
        Function initializes an empty Huffman Tree.
        """
        self.res_codes = {}
        self.root = None

    @classmethod
    def build_from_freq(cls, freq: list[int]) -> "HuffmanTree":
        """
        Builds a Huffman tree from a frequency table and generates its codes.

        Nodes leave the queue lowest frequency first. Equal frequencies are
        ordered by arrival: leaves arrive in symbol order, merged nodes
        arrive after all leaves in the order they are created. The first
        node taken becomes the left child.

        :param freq: list indexed by symbol, PSEUDO_EOF count included
        :return: HuffmanTree with root and res_codes filled
        """
        tree = cls()

        nodes = [
            Node(symbol, count, order=symbol)
            for symbol, count in enumerate(freq)
            if count > 0
        ]
        # empty input leaves PSEUDO_EOF alone, pair it with an unused
        # symbol so the root still has two children
        if len(nodes) < 2:
            filler = next(s for s in range(ALPH_SIZE) if not freq[s])
            nodes.append(Node(filler, 0, order=filler))
        heapq.heapify(nodes)

        order = ALPH_SIZE + 1
        while len(nodes) > 1:
            l = heapq.heappop(nodes)
            r = heapq.heappop(nodes)
            parent = Node(0, l.val_freq + r.val_freq, l, r, order=order)
            order += 1
            heapq.heappush(nodes, parent)

        tree.root = nodes[0]
        tree.codes_generation()
        return tree

    @classmethod
    def from_root(cls, root: Node) -> "HuffmanTree":
        """
        Wraps an existing tree, e.g. one read from a header, and generates its codes.

        :param root: root node of a complete tree
        :return: HuffmanTree with res_codes filled
        """
        tree = cls()
        tree.root = root
        tree.codes_generation()
        return tree

    def codes_generation(self, node=None, curr_code=""):
        """
        Recursive function that generates
        code for each symbol, preorder traversal of Huffman's tree

        :param node: node to start traversal from
        :param curr_code: str, current code of a symbol
        """

        # if node is not passed, we start traversal from the root
        if node is None:
            node = self.root
            self.res_codes = {}

        # if our node is a leaf than we write the code for it
        if node.is_leaf():
            self.res_codes[node.value] = curr_code
            return

        self.codes_generation(node.left, curr_code + "0")
        self.codes_generation(node.right, curr_code + "1")

    def leaves(self) -> list[int]:
        """
        Returns symbols of all leaves from left to right.
        """
        result = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                result.append(node.value)
            else:
                stack.append(node.right)
                stack.append(node.left)
        return result

    def height(self, node=None) -> int:
        """
        Returns the number of edges on the longest root-to-leaf path.
        """
        if node is None:
            node = self.root
        if node.is_leaf():
            return 0
        return 1 + max(self.height(node.left), self.height(node.right))
