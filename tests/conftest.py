"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from datetime import datetime
from pathlib import Path
from PIL import Image


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_user_config(temp_dir, monkeypatch):
    """Point user configuration at an empty directory for every test."""
    from photodupes.user_config import get_user_config

    config_dir = temp_dir / ".photodupes-config"
    monkeypatch.setenv("PHOTODUPES_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("PHOTODUPES_EXTENSIONS", raising=False)
    monkeypatch.delenv("PHOTODUPES_WORKERS", raising=False)
    config = get_user_config()
    config.reload()
    yield config_dir
    config.reload()


@pytest.fixture
def photo_tree(temp_dir):
    """
    Create a small photo library for testing.

    Layout (under temp_dir / "library"):
        red.png                 red square
        trips/red_copy.png      exact copy of red.png
        trips/blue.jpg          unique
        trips/2020/RED_AGAIN.PNG  exact copy of red.png, upper-case name
        notes.txt               not a photo

    Returns:
        dict with 'root' and paths for each file
    """
    root = temp_dir / "library"
    (root / "trips" / "2020").mkdir(parents=True)

    red = Image.new('RGB', (64, 64), color='red')
    paths = {'root': root}

    paths['red'] = root / "red.png"
    red.save(paths['red'], 'PNG')

    paths['red_copy'] = root / "trips" / "red_copy.png"
    shutil.copyfile(paths['red'], paths['red_copy'])

    paths['red_again'] = root / "trips" / "2020" / "RED_AGAIN.PNG"
    shutil.copyfile(paths['red'], paths['red_again'])

    paths['blue'] = root / "trips" / "blue.jpg"
    Image.new('RGB', (64, 64), color='blue').save(paths['blue'], 'JPEG')

    paths['notes'] = root / "notes.txt"
    paths['notes'].write_text("not a photo")

    return paths


@pytest.fixture
def abc_tree(temp_dir):
    """Directory with A ("X"), B ("Y") and C ("X", duplicate of A)."""
    root = temp_dir / "abc"
    root.mkdir()
    (root / "a.jpg").write_bytes(b"X")
    (root / "b.jpg").write_bytes(b"Y")
    (root / "c.jpg").write_bytes(b"X")
    return root


@pytest.fixture
def make_record():
    """Factory for FileRecord objects that do not need files on disk."""
    from photodupes.models import FileRecord

    def _make(path, content_hash, size=100):
        return FileRecord(
            full_path=path,
            size_bytes=size,
            content_hash=content_hash,
            last_modified=datetime(2024, 5, 1, 12, 30, 0),
            created=datetime(2024, 4, 30, 8, 0, 0),
        )

    return _make
