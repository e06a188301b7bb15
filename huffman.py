import heapq
from dataclasses import dataclass
from typing import Dict, Optional
from errors import EmptyInput, MalformedTree

@dataclass
class Node:
    freq: int
    sym: Optional[int] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    seq: int = 0  # creation order, breaks weight ties

    def is_leaf(self) -> bool:
        return self.sym is not None

    def __lt__(self, other):  # for heapq
        return (self.freq, self.seq) < (other.freq, other.seq)

def build_tree(freqs: Dict[int, int]) -> Node:
    """
    Greedy Huffman merge. Leaves are created in ascending symbol order, merged
    nodes get the next sequence number; first pop is the left child.
    A single symbol comes back as a bare leaf.
    """
    if not freqs:
        raise EmptyInput("cannot build a tree from an empty frequency table")
    pq = [Node(freq=f, sym=s, seq=i) for i, (s, f) in enumerate(sorted(freqs.items()))]
    heapq.heapify(pq)
    seq = len(pq)
    while len(pq) > 1:
        a = heapq.heappop(pq)
        b = heapq.heappop(pq)
        heapq.heappush(pq, Node(freq=a.freq + b.freq, left=a, right=b, seq=seq))
        seq += 1
    return pq[0]

def build_codebook(node: Node) -> Dict[int, str]:
    # iterative walk, skewed trees can be 255 deep
    if node.is_leaf():
        return {node.sym: "0"}
    code: Dict[int, str] = {}
    stack = [(node, "")]
    while stack:
        cur, prefix = stack.pop()
        if cur.is_leaf():
            code[cur.sym] = prefix
            continue
        if cur.left is None or cur.right is None:
            raise MalformedTree(f"internal node at '{prefix}' is missing a child")
        stack.append((cur.right, prefix + "1"))
        stack.append((cur.left, prefix + "0"))
    return code
