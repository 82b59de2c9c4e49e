from __future__ import annotations
import copy
import logging
import reprlib
from typing import Any, Dict, Generic, Optional, TypeVar
from .iterators import IntoIter, Iter, IterMut
from .ref import MutRef


T = TypeVar('T')

logger = logging.getLogger(__name__)


class _Node(Generic[T]):
    def __init__(self, val: T, next: Optional[_Node[T]]):
        self.val: T = val
        self.next: Optional[_Node[T]] = next


class LinkedList(Generic[T]):
    def __init__(self):
        self._head: Optional[_Node[T]] = None
        self._count: int = 0
        # bumped on every structural change; borrows compare against it
        self._version: int = 0


    def push(self, x: T):
        self._head = _Node(x, self._head)
        self._count += 1
        self._version += 1


    def pop(self) -> Optional[T]:
        n = self._head
        if n is None:
            return None
        self._head = n.next
        n.next = None
        self._count -= 1
        self._version += 1
        return n.val


    def peek(self) -> Optional[T]:
        if self._head is None:
            return None
        return self._head.val


    def peek_mut(self) -> Optional[MutRef[T]]:
        if self._head is None:
            return None
        return MutRef(self, self._head)


    def length(self) -> int:
        return self._count


    def is_empty(self) -> bool:
        return self._count == 0


    def clear(self):
        released = self._release()
        self._version += 1
        if released:
            logger.debug('released %d nodes', released)


    def _release(self) -> int:
        # unlink one node at a time so no node frees a long tail recursively
        n = self._head
        self._head = None
        self._count = 0
        released = 0
        while n is not None:
            nxt = n.next
            n.next = None
            n = nxt
            released += 1
        return released


    def into_iter(self) -> IntoIter[T]:
        moved: LinkedList[T] = LinkedList()
        moved._head, moved._count = self._head, self._count
        self._head = None
        self._count = 0
        self._version += 1
        return IntoIter(moved)


    def iter(self) -> Iter[T]:
        return Iter(self)


    def iter_mut(self) -> IterMut[T]:
        return IterMut(self)


    def clone(self) -> LinkedList[T]:
        return self._fill(LinkedList(), copy.copy)


    def _fill(self, c: LinkedList[T], dup) -> LinkedList[T]:
        # append at the tail so the copy keeps front-to-back order
        tail: Optional[_Node[T]] = None
        node = self._head
        while node is not None:
            n = _Node(dup(node.val), None)
            if tail is None:
                c._head = n
            else:
                tail.next = n
            tail = n
            node = node.next
        c._count = self._count
        return c


    def __copy__(self) -> LinkedList[T]:
        return self.clone()


    def __deepcopy__(self, memo: Dict[int, Any]) -> LinkedList[T]:
        c: LinkedList[T] = LinkedList()
        memo[id(self)] = c
        return self._fill(c, lambda v: copy.deepcopy(v, memo))


    def __len__(self):
        return self._count


    def __bool__(self):
        return self._count > 0


    def __iter__(self):
        return Iter(self)


    def __eq__(self, other):
        if not isinstance(other, LinkedList):
            return NotImplemented
        if self._count != other._count:
            return False
        a, b = self._head, other._head
        while a is not None and b is not None:
            if a.val != b.val:
                return False
            a, b = a.next, b.next
        return True


    __hash__ = None  # type: ignore


    @reprlib.recursive_repr()
    def __repr__(self):
        return f'LinkedList({list(self.iter())!r})'


    def __del__(self):
        self._release()
