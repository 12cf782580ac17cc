from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version('fcp')
except PackageNotFoundError:
    __version__ = 'Please install this project with setup.py'

# Patch the main entry points into the root namespace
from fcp.copytree import copy_tree
from fcp.report import CopyReport
from fcp.utils.filecopy import CopyTask, CopyResult, WorkerPool, copy_file

import fcp.io
import fcp.utils
