import os
import warnings


class SkippedDirectoryWarning(UserWarning):
    pass


class DirectoryWalker(object):
    """
    A depth first enumerator of the regular files below a root.

    Directories that cannot be opened below the root are skipped rather
    than aborting the walk. Every skip is recorded in the skipped
    attribute as a (path, error) tuple and warned about.

    Attributes
    ----------
    skipped : list
              of (path, OSError) tuples for the sub-directories and
              entries that could not be read
    """
    def __init__(self):
        self.skipped = []

    def walk(self, root):
        """
        Enumerate the regular files under root.

        Parameters
        ----------
        root : str
               The directory (or single file) to enumerate

        Yields
        ------
         : tuple
           (source_path, relative_path) where relative_path is the path of
           the file below root, or '' if root is itself a file

        Raises
        ------
        OSError
            If root does not exist or can not be read
        """
        if os.path.isfile(root) and not os.path.islink(root):
            yield root, ''
            return
        yield from self._walk(root, '')

    def _walk(self, path, relative):
        try:
            # Materialize so that the handle is released before recursing
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            # Only the root is fatal
            if not relative:
                raise
            self.skipped.append((path, e))
            warnings.warn('Skipping unreadable directory {}: {}'.format(path, e),
                          SkippedDirectoryWarning)
            return

        for entry in entries:
            if relative:
                entry_relative = os.path.join(relative, entry.name)
            else:
                entry_relative = entry.name
            try:
                # May fall back to lstat, e.g. for an entry removed mid walk
                is_file = entry.is_file(follow_symlinks=False)
                is_dir = not is_file and entry.is_dir(follow_symlinks=False)
            except OSError as e:
                self.skipped.append((entry.path, e))
                warnings.warn('Skipping unreadable entry {}: {}'.format(entry.path, e),
                              SkippedDirectoryWarning)
                continue
            if is_file:
                yield entry.path, entry_relative
            elif is_dir:
                yield from self._walk(entry.path, entry_relative)

def walk(root):
    """
    Convenience wrapper returning the list of file paths under root.

    Parameters
    ----------
    root : str
           The directory (or single file) to enumerate

    Returns
    -------
     : list
       of source paths
    """
    return [path for path, _ in DirectoryWalker().walk(root)]
