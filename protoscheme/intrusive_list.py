"""Two-way linked list links that an object embeds, one per list it belongs to."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterator, Optional


class ListDir(IntEnum):
    """Directions in a list; lists grow to the right by default."""

    RIGHT = 0
    DEFAULT = 0
    LEFT = 1
    RDEFAULT = 1


def reverse_dir(direction: ListDir) -> ListDir:
    """Return the direction opposite to the given one."""
    return ListDir.RDEFAULT if direction == ListDir.DEFAULT else ListDir.DEFAULT


class ListItem:
    """A link of its owner in one list.

    An object that belongs to several lists holds one ListItem per list.
    """

    def __init__(
        self,
        owner: Any,
        peer: Optional["ListItem"] = None,
        direction: ListDir = ListDir.DEFAULT,
    ) -> None:
        self.owner = owner
        self._peers: list[Optional[ListItem]] = [None, None]
        if peer is not None:
            self.attach_in_dir(peer, direction)

    def peer(self, direction: ListDir) -> Optional["ListItem"]:
        """Return the neighbour in the given direction."""
        return self._peers[direction]

    @property
    def next(self) -> Optional["ListItem"]:
        return self._peers[ListDir.DEFAULT]

    @property
    def prev(self) -> Optional["ListItem"]:
        return self._peers[ListDir.RDEFAULT]

    def attach_in_dir(self, peer: Optional["ListItem"], direction: ListDir) -> None:
        """Place this item next to peer, so that peer lies in the given direction."""
        rdir = reverse_dir(direction)
        self._peers[direction] = peer
        self._peers[rdir] = None
        if peer is not None:
            rdir_peer = peer._peers[rdir]
            if rdir_peer is not None:
                rdir_peer._peers[direction] = self
            peer._peers[rdir] = self
            self._peers[rdir] = rdir_peer

    def attach(self, peer: Optional["ListItem"]) -> None:
        """Attach in the default direction."""
        self.attach_in_dir(peer, ListDir.DEFAULT)

    def detach(self) -> None:
        """Unlink from both neighbours and join them to each other."""
        nxt = self._peers[ListDir.DEFAULT]
        prv = self._peers[ListDir.RDEFAULT]
        if nxt is not None:
            nxt._peers[ListDir.RDEFAULT] = prv
        if prv is not None:
            prv._peers[ListDir.DEFAULT] = nxt
        self._peers = [None, None]

    def __iter__(self) -> Iterator[Any]:
        """Yield owners from this item onwards in the default direction."""
        item: Optional[ListItem] = self
        while item is not None:
            yield item.owner
            item = item.next