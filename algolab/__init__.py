"""Classic algorithms: sorting, searching, graphs, optimisation, Huffman codes, scheduling, memory allocation and deadlock avoidance."""

__version__ = "0.1.0"
__all__ = [
    "arrayops",
    "banker",
    "digits",
    "graphs",
    "huffman",
    "memory",
    "optimization",
    "scheduling",
    "sorting",
]