from time import time

from fcp.config_parser import available_parallelism
from fcp.io.mapper import make_task, top_level_name
from fcp.io.walker import DirectoryWalker
from fcp.report import CopyReport
from fcp.utils.filecopy import BATCH_SIZE, WorkerPool, copy_file
from fcp.utils.safe_queue import SafeQueue


def enqueue_tree(source, destination, queue, walker=None):
    """
    Walk source and push one CopyTask per regular file onto the queue.

    Parameters
    ----------
    source : str
             The root of the tree to copy

    destination : str
                  The directory under which the tree is recreated

    queue : SafeQueue
            Receives the tasks

    walker : DirectoryWalker
             Optional, used to collect skipped directories

    Returns
    -------
    n : int
        The number of tasks pushed
    """
    if walker is None:
        walker = DirectoryWalker()
    name = top_level_name(source)
    n = 0
    for path, relative in walker.walk(source):
        queue.push(make_task(path, relative, destination, name))
        n += 1
    return n

def copy_tree(source, destination, nworkers=None, batch_size=BATCH_SIZE,
              copier=copy_file, callback=None):
    """
    Copy the tree rooted at source to destination/<name of source> using
    a pool of worker threads.

    The walk completes before any worker starts. This call returns only
    after every worker has been joined.

    Parameters
    ----------
    source : str
             The directory (or single file) to copy

    destination : str
                  The destination root

    nworkers : int
               The number of worker threads. Defaults to the host's
               available parallelism.

    batch_size : int
                 The number of tasks a worker drains at once

    copier : callable
             Performs a single copy, see fcp.utils.filecopy.copy_file

    callback : callable
               Optional, called in the worker thread with each CopyResult

    Returns
    -------
     : CopyReport

    Raises
    ------
    OSError
        If source does not exist or can not be read
    ValueError
        If nworkers or batch_size is not a positive integer
    """
    if nworkers is None:
        nworkers = available_parallelism()
    # Validate before walking anything
    pool = WorkerPool(nworkers, batch_size=batch_size, copier=copier, callback=callback)

    start = time()
    queue = SafeQueue()
    walker = DirectoryWalker()
    enqueue_tree(source, destination, queue, walker=walker)
    results = pool.run(queue)

    return CopyReport(results, skipped=walker.skipped, nworkers=nworkers,
                      batch_size=batch_size, elapsed=time() - start)
