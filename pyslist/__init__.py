from .linked import LinkedList
from .iterators import IntoIter, Iter, IterMut
from .ref import MutRef, BorrowError
