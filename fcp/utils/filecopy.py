from collections import namedtuple
import os
import shutil
import threading
import warnings

# Number of tasks a worker removes from the queue per lock acquisition
BATCH_SIZE = 10000

# Worker count used when the host parallelism can not be determined
DEFAULT_WORKERS = 4

CopyTask = namedtuple('CopyTask', ['source_path', 'destination_path'])


class CopyResult(namedtuple('CopyResult', ['task', 'error'])):
    __slots__ = ()

    @property
    def success(self):
        return self.error is None


class CopyFailedWarning(UserWarning):
    pass


class CallbackFailedWarning(UserWarning):
    pass


class CopyError(Exception):
    """
    Base class for a failure to copy a single file.

    Parameters
    ----------
    destination : str
                  The destination path of the failed copy

    cause : OSError
            The underlying error
    """
    stage = 'copy'

    def __init__(self, destination, cause):
        super().__init__(destination, cause)
        self.destination = destination
        self.cause = cause

    def __str__(self):
        return '{} failed for {}: {}'.format(self.stage, self.destination, self.cause)


class DirectoryCreationError(CopyError):
    stage = 'mkdir'


class SourceReadError(CopyError):
    stage = 'read'


class DestinationWriteError(CopyError):
    stage = 'write'


class CopyIOError(CopyError):
    stage = 'transfer'


class UnexpectedCopyError(CopyError):
    """
    Raised by a copier for anything other than an OSError. The cause is
    the original exception.
    """
    stage = 'worker'


def copy_file(task):
    """
    Copy a single file, creating any missing destination directories and
    overwriting an existing destination. Failures are captured in the
    returned result and warned, never raised.

    Parameters
    ----------
    task : CopyTask
           The source and destination paths

    Returns
    -------
     : CopyResult
       with error set to a CopyError subclass on failure
    """
    src, dst = task
    try:
        parent = os.path.dirname(dst)
        if parent:
            # exist_ok tolerates another worker creating the same parent
            try:
                os.makedirs(parent, exist_ok=True)
            except OSError as e:
                raise DirectoryCreationError(dst, e)

        try:
            fsrc = open(src, 'rb')
        except OSError as e:
            raise SourceReadError(dst, e)

        with fsrc:
            try:
                fdst = open(dst, 'wb')
            except OSError as e:
                raise DestinationWriteError(dst, e)
            with fdst:
                try:
                    shutil.copyfileobj(fsrc, fdst)
                except OSError as e:
                    raise CopyIOError(dst, e)
    except CopyError as e:
        warnings.warn(str(e), CopyFailedWarning)
        if isinstance(e, CopyIOError):
            # Do not leave a truncated destination behind
            try:
                os.remove(dst)
            except OSError as rm_error:
                warnings.warn('Unable to remove partial file {}: {}'.format(dst, rm_error),
                              CopyFailedWarning)
        return CopyResult(task, e)
    return CopyResult(task, None)


class FileCopy(threading.Thread):
    def __init__(self, queue, batch_size=BATCH_SIZE, copier=copy_file, callback=None):
        """
        Instantiate a FileCopy worker.

        Parameters
        ----------
        queue : SafeQueue
                The processing queue from which work is pulled.

        batch_size : int
                     The maximum number of tasks drained per pull

        copier : callable
                 Called with each CopyTask, returning a CopyResult

        callback : callable
                   Optional, called with each CopyResult from this thread
        """
        threading.Thread.__init__(self)
        self.queue = queue
        self.batch_size = batch_size
        self.copier = copier
        self.callback = callback
        self.results = []
        self.daemon = True

    def run(self):
        """
        When the thread launches, drain batches of tasks off of the
        queue and execute a file copy for each. A drain can come back
        empty when another worker emptied the queue between the check and
        the drain; the loop simply checks again. Once the queue is empty
        the thread exits run and terminates.

        Neither the copier nor the callback can kill the thread: a drained
        task always ends up in results, so no task is lost.
        """
        while not self.queue.is_empty():
            for task in self.queue.drain(self.batch_size):
                try:
                    result = self.copier(task)
                except Exception as e:
                    error = UnexpectedCopyError(task.destination_path, e)
                    warnings.warn(str(error), CopyFailedWarning)
                    result = CopyResult(task, error)
                self.results.append(result)

                if self.callback is not None:
                    try:
                        self.callback(result)
                    except Exception as e:
                        warnings.warn('Callback failed for {}: {!r}'.format(task.destination_path, e),
                                      CallbackFailedWarning)


class WorkerPool(object):
    """
    A fixed size pool of FileCopy threads sharing one queue.

    Attributes
    ----------
    nworkers : int
               The number of threads started per run

    batch_size : int
                 Drain granularity; larger batches mean fewer lock
                 acquisitions but a less even split of the tail of the
                 queue across workers
    """
    def __init__(self, nworkers, batch_size=BATCH_SIZE, copier=copy_file, callback=None):
        for name, value in (('nworkers', nworkers), ('batch_size', batch_size)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError('{} must be a positive integer, not {!r}'.format(name, value))
        self.nworkers = nworkers
        self.batch_size = batch_size
        self.copier = copier
        self.callback = callback

    def __repr__(self):
        return 'WorkerPool(nworkers={}, batch_size={})'.format(self.nworkers, self.batch_size)

    def run(self, queue):
        """
        Start the workers on the queue and block until every one of them
        has exited.

        Parameters
        ----------
        queue : SafeQueue
                of CopyTasks

        Returns
        -------
        results : list
                  of CopyResults from all workers
        """
        workers = [FileCopy(queue, batch_size=self.batch_size,
                            copier=self.copier, callback=self.callback)
                   for _ in range(self.nworkers)]
        for w in workers:
            w.start()
        for w in workers:
            w.join()

        results = []
        for w in workers:
            results.extend(w.results)
        return results
