import os

import pytest


# name -> contents, relative to the tree root
TREE = {'a.txt': b'alpha',
        'b.bin': bytes(range(256)),
        'sub/c.txt': b'charlie',
        'sub/deeper/d.txt': b'delta',
        'sub/deeper/empty.dat': b'',
        'other/e.txt': b'echo'}

def build_tree(root, files):
    for rel, data in files.items():
        path = os.path.join(root, *rel.split('/'))
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'wb') as f:
            f.write(data)
    return root

def read_tree(root):
    """
    Read every file under root into a {relative path: bytes} dict, with
    '/' separated keys.
    """
    out = {}
    for dirpath, _, filenames in os.walk(root):
        for name in filenames:
            path = os.path.join(dirpath, name)
            rel = os.path.relpath(path, root).replace(os.sep, '/')
            with open(path, 'rb') as f:
                out[rel] = f.read()
    return out

@pytest.fixture
def tree_files():
    return dict(TREE)

@pytest.fixture
def source_tree(tmpdir, tree_files):
    return build_tree(tmpdir.join('src').strpath, tree_files)

@pytest.fixture
def destination(tmpdir):
    return tmpdir.join('out').strpath

@pytest.fixture
def wide_tree(tmpdir):
    """
    A tree with enough files that several workers and batches are in
    play at once.
    """
    files = {f'd{i % 7}/s{i % 3}/f{i}.txt': str(i).encode() * (i % 5 + 1)
             for i in range(300)}
    return build_tree(tmpdir.join('wide').strpath, files), files

@pytest.fixture
def nested_name_tree(tmpdir):
    """
    A tree whose root name recurs below it, e.g. photos/photos/img.jpg.
    """
    root = tmpdir.join('data').join('photos').strpath
    files = {'photos/img.jpg': b'jpeg',
             'photos/photos/deep.jpg': b'deeper',
             'top.jpg': b'top'}
    return build_tree(root, files), files

@pytest.fixture
def tree_reader():
    return read_tree

@pytest.fixture
def tree_builder():
    return build_tree
