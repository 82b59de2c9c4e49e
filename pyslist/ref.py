from __future__ import annotations
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .linked import LinkedList, _Node


T = TypeVar('T')


# exceptions

class BorrowError(RuntimeError):
    pass


class MutRef(Generic[T]):
    """Writable handle onto one node's value; expires on any structural change."""

    def __init__(self, list: LinkedList[T], node: _Node[T]):
        self._list: LinkedList[T] = list
        self._node: _Node[T] = node
        self._version: int = list._version


    def _check(self):
        if self._list._version != self._version:
            raise BorrowError('borrow of LinkedList element outlived a structural change')


    def get(self) -> T:
        self._check()
        return self._node.val


    def set(self, x: T):
        self._check()
        self._node.val = x


    @property
    def value(self) -> T:
        return self.get()


    @value.setter
    def value(self, x: T):
        self.set(x)


    def __repr__(self):
        if self._list._version != self._version:
            return 'MutRef(<expired>)'
        return f'MutRef({self._node.val!r})'
