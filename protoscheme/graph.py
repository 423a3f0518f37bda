"""Directed graph whose nodes and edges are kept in intrusive linked lists."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class Node:
    """A graph node with its own lists of incoming and outgoing edges."""

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: Optional[Node] = None
        self.prev: Optional[Node] = None
        # Predecessors are edges pointing here, successors are edges leaving here.
        self.first_pred_edge: Optional[Edge] = None
        self.first_succ_edge: Optional[Edge] = None

    def pred_edges(self) -> Iterator["Edge"]:
        """Yield incoming edges, most recently added first."""
        edge = self.first_pred_edge
        while edge is not None:
            yield edge
            edge = edge.next_pred_edge

    def succ_edges(self) -> Iterator["Edge"]:
        """Yield outgoing edges, most recently added first."""
        edge = self.first_succ_edge
        while edge is not None:
            yield edge
            edge = edge.next_succ_edge

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class Edge:
    """A directed edge from pred_node to succ_node.

    Creating an edge links it at the head of both nodes' edge lists.
    """

    def __init__(self, pred_node: Node, succ_node: Node) -> None:
        if pred_node is None or succ_node is None:
            raise ValueError("an edge needs both a predecessor and a successor node")
        self.next: Optional[Edge] = None
        self.prev: Optional[Edge] = None
        self.pred_node = pred_node
        self.succ_node = succ_node

        self.prev_pred_edge: Optional[Edge] = None
        self.next_pred_edge: Optional[Edge] = succ_node.first_pred_edge
        if self.next_pred_edge is not None:
            self.next_pred_edge.prev_pred_edge = self
        succ_node.first_pred_edge = self

        self.prev_succ_edge: Optional[Edge] = None
        self.next_succ_edge: Optional[Edge] = pred_node.first_succ_edge
        if self.next_succ_edge is not None:
            self.next_succ_edge.prev_succ_edge = self
        pred_node.first_succ_edge = self

    def __repr__(self) -> str:
        return f"Edge({self.pred_node!r} -> {self.succ_node!r})"


class Graph:
    """Owner of nodes and edges; nodes get consecutive ids starting at 0."""

    def __init__(self) -> None:
        self.first_node: Optional[Node] = None
        self.last_node: Optional[Node] = None
        self.first_edge: Optional[Edge] = None
        self.last_edge: Optional[Edge] = None
        self._node_id = 0

    def add_node(self) -> Node:
        """Append a new node whose data is the next id."""
        node = Node(self._node_id)
        if self.last_node is None:
            self.first_node = node
        else:
            self.last_node.next = node
        node.prev = self.last_node
        self.last_node = node
        self._node_id += 1
        return node

    def remove_node(self, node: Node) -> None:
        """Remove node together with every edge that touches it."""
        if node is None:
            raise ValueError("no node given")
        if (node.prev is None and self.first_node is not node) or (
            node.next is None and self.last_node is not node
        ):
            raise ValueError("node does not belong to this graph")

        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.first_node = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.last_node = node.prev

        while node.first_pred_edge is not None:
            self.remove_edge(node.first_pred_edge)
        while node.first_succ_edge is not None:
            self.remove_edge(node.first_succ_edge)

        node.next = None
        node.prev = None

    def add_edge(self, pred_node: Node, succ_node: Node) -> Edge:
        """Append a new edge from pred_node to succ_node."""
        edge = Edge(pred_node, succ_node)
        if self.last_edge is None:
            self.first_edge = edge
        else:
            self.last_edge.next = edge
        edge.prev = self.last_edge
        self.last_edge = edge
        return edge

    def remove_edge(self, edge: Edge) -> None:
        """Unlink edge from the graph and from both of its nodes."""
        if edge is None:
            raise ValueError("no edge given")
        if (edge.prev is None and self.first_edge is not edge) or (
            edge.next is None and self.last_edge is not edge
        ):
            raise ValueError("edge does not belong to this graph")

        if edge.prev is not None:
            edge.prev.next = edge.next
        else:
            self.first_edge = edge.next
        if edge.next is not None:
            edge.next.prev = edge.prev
        else:
            self.last_edge = edge.prev

        if edge.prev_pred_edge is not None:
            edge.prev_pred_edge.next_pred_edge = edge.next_pred_edge
        else:
            edge.succ_node.first_pred_edge = edge.next_pred_edge
        if edge.next_pred_edge is not None:
            edge.next_pred_edge.prev_pred_edge = edge.prev_pred_edge

        if edge.prev_succ_edge is not None:
            edge.prev_succ_edge.next_succ_edge = edge.next_succ_edge
        else:
            edge.pred_node.first_succ_edge = edge.next_succ_edge
        if edge.next_succ_edge is not None:
            edge.next_succ_edge.prev_succ_edge = edge.prev_succ_edge

        edge.next = edge.prev = None
        edge.next_pred_edge = edge.prev_pred_edge = None
        edge.next_succ_edge = edge.prev_succ_edge = None

    def nodes(self) -> Iterator[Node]:
        """Yield nodes in insertion order."""
        node = self.first_node
        while node is not None:
            yield node
            node = node.next

    def edges(self) -> Iterator[Edge]:
        """Yield edges in insertion order."""
        edge = self.first_edge
        while edge is not None:
            yield edge
            edge = edge.next