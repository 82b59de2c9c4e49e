from __future__ import annotations
from typing import TYPE_CHECKING, Generic, Optional, TypeVar
from .ref import MutRef

if TYPE_CHECKING:
    from .linked import LinkedList, _Node


T = TypeVar('T')


class IntoIter(Generic[T]):
    def __init__(self, list: LinkedList[T]):
        self._list: LinkedList[T] = list


    def __iter__(self) -> IntoIter[T]:
        return self


    def __next__(self) -> T:
        if self._list.is_empty():
            raise StopIteration
        return self._list.pop()  # type: ignore


    def __length_hint__(self) -> int:
        return self._list.length()


class Iter(Generic[T]):
    def __init__(self, list: LinkedList[T]):
        self._list: Optional[LinkedList[T]] = list
        self._version: int = list._version
        self._next: Optional[_Node[T]] = list._head
        self._remaining: int = list._count


    def __iter__(self) -> Iter[T]:
        return self


    def __next__(self) -> T:
        if self._list is None:
            raise StopIteration
        if self._list._version != self._version:
            raise RuntimeError('LinkedList mutated during iteration')
        node = self._next
        if node is None:
            # exhausted; later changes to the list no longer concern us
            self._list = None
            raise StopIteration
        self._next = node.next
        self._remaining -= 1
        return node.val


    def __length_hint__(self) -> int:
        return self._remaining


class IterMut(Generic[T]):
    def __init__(self, list: LinkedList[T]):
        self._list: Optional[LinkedList[T]] = list
        self._version: int = list._version
        self._next: Optional[_Node[T]] = list._head
        self._remaining: int = list._count


    def __iter__(self) -> IterMut[T]:
        return self


    def __next__(self) -> MutRef[T]:
        if self._list is None:
            raise StopIteration
        if self._list._version != self._version:
            raise RuntimeError('LinkedList mutated during iteration')
        # take the rest of the chain out before advancing
        node, self._next = self._next, None
        if node is None:
            self._list = None
            raise StopIteration
        self._next = node.next
        self._remaining -= 1
        return MutRef(self._list, node)


    def __length_hint__(self) -> int:
        return self._remaining
