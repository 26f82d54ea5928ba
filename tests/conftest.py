"""Shared fixtures for the DirTreeLib test suite."""

import pytest

from dirtreelib.testing import MemoryFileSystemAdapter, write_fixture_tree

# Directory layout used throughout the suite.
# File sizes: 6 + 6 at the root, 8 in dir-1, 9 in dir-11, 8 in dir-2.
FIXTURE_LAYOUT = {
    'dir-1': {
        'dir-11': {
            'file-11-1.txt': 'file-11-1',
        },
        'dir-12': {},
        'dir-13': {},
        'file-1-1.txt': 'file-1-1',
    },
    'dir-2': {
        'file-2-1.txt': 'file-2-1',
    },
    'file-1.txt': 'file-1',
    'file-2.txt': 'file-2',
}

FIXTURE_ROOT = '/work/project'


@pytest.fixture
def memory_fs():
    """In-memory copy of FIXTURE_LAYOUT with insertion-ordered listings."""
    return MemoryFileSystemAdapter(FIXTURE_LAYOUT, root=FIXTURE_ROOT)


@pytest.fixture
def disk_tree(tmp_path):
    """FIXTURE_LAYOUT written to a real temporary directory."""
    project = tmp_path / 'project'
    project.mkdir()
    return write_fixture_tree(project, FIXTURE_LAYOUT)
