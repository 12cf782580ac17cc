import os

from fcp.utils.filecopy import CopyTask


def top_level_name(root):
    """
    Given the root that a walk was started from, get the name of the
    directory (or file) that is recreated under the destination.

    Parameters
    ----------
    root : str
           The path passed to the walker

    Returns
    -------
     : str
       The final path segment of root, after stripping one trailing
       separator. Relative segments ('.', '..') and empty names are
       resolved against the absolute path so that the result never
       points outside of the destination.

    Examples
    --------
    >>> top_level_name('/a/b/src/')
    'src'
    >>> top_level_name('/a/b/src')
    'src'
    """
    stripped = root
    if root.endswith(os.sep) or (os.altsep and root.endswith(os.altsep)):
        stripped = root[:-1]
    name = os.path.basename(stripped)
    if name in ('', os.curdir, os.pardir):
        name = os.path.basename(os.path.abspath(root))
    return name

def map_destination(relative_path, destination_root, top_level_name):
    """
    Compute the destination path of a file from its path relative to the
    walked root.

    The relative path is the one accumulated by the walker as it descends,
    so the walked directory name may recur anywhere in the tree without
    changing the result.

    Parameters
    ----------
    relative_path : str
                    Path of the file below the walked root. Empty when the
                    walked root is itself a file.

    destination_root : str
                       The directory the tree is copied into

    top_level_name : str
                     The name of the walked root, see top_level_name()

    Returns
    -------
     : str
       destination_root/top_level_name/relative_path

    Examples
    --------
    >>> map_destination('x/y.txt', '/out/', 'src')
    '/out/src/x/y.txt'
    >>> map_destination('photos/img.jpg', '/out', 'photos')
    '/out/photos/photos/img.jpg'
    """
    if relative_path:
        return os.path.join(destination_root, top_level_name, relative_path)
    return os.path.join(destination_root, top_level_name)

def make_task(source_path, relative_path, destination_root, top_level_name):
    return CopyTask(source_path,
                    map_destination(relative_path, destination_root, top_level_name))
