from collections import deque
import threading


class SafeQueue(object):
    """
    An unbounded, insertion ordered container shared between a producer
    and any number of consumer threads. Every operation runs under a
    single lock so that a snapshot (emptiness, length) or a batch removal
    is atomic with respect to every other call.

    Unlike queue.Queue, items are consumed in batches via drain rather than
    one at a time, and consumers never block waiting for new items.

    Examples
    --------
    >>> q = SafeQueue()
    >>> for i in range(5):
    ...     q.push(i)
    >>> q.drain(3)
    [0, 1, 2]
    >>> q.drain(3)
    [3, 4]
    >>> q.is_empty()
    True
    """
    def __init__(self, items=None):
        self._items = deque(items or [])
        self._lock = threading.Lock()

    def __repr__(self):
        return 'SafeQueue(len={})'.format(len(self))

    def __len__(self):
        with self._lock:
            return len(self._items)

    def clone(self):
        """
        Return a new handle onto the same backing store and lock. Pushes
        through either handle are visible to drains through the other.
        """
        other = SafeQueue.__new__(SafeQueue)
        other._items = self._items
        other._lock = self._lock
        return other

    def push(self, item):
        with self._lock:
            self._items.append(item)

    def is_empty(self):
        with self._lock:
            return not self._items

    def drain(self, n):
        """
        Atomically remove and return up to n items from the front of the
        queue.

        Parameters
        ----------
        n : int
            The maximum number of items to remove

        Returns
        -------
        batch : list
                The removed items in insertion order. Empty if the queue
                is empty or n is not positive.
        """
        with self._lock:
            if n >= len(self._items):
                batch = list(self._items)
                self._items.clear()
                return batch
            return [self._items.popleft() for _ in range(max(n, 0))]
