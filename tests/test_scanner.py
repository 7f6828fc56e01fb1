"""
Unit tests for scanner module functions.
"""

import hashlib
import os
import pytest
from pathlib import Path

from photodupes.scanner import (
    normalize_patterns,
    find_photo_files,
    calculate_file_hash,
    fingerprint_file,
    fingerprint_files,
    FingerprintError,
    group_by_hash,
    find_duplicate_groups,
    summarize_groups,
)
from photodupes.scanner import hashing

PHOTO_PATTERNS = normalize_patterns(['jpg', 'jpeg', 'png'])


def _fail_for(monkeypatch, bad_path):
    """Make hashing raise PermissionError for one path."""
    original = hashing.calculate_file_hash
    bad_path = str(bad_path)

    def _hash(filepath, *args, **kwargs):
        if str(filepath) == bad_path:
            raise PermissionError(13, "Permission denied", bad_path)
        return original(filepath, *args, **kwargs)

    monkeypatch.setattr(hashing, "calculate_file_hash", _hash)


class TestNormalizePatterns:
    """Test normalize_patterns function."""

    def test_bare_and_dotted_extensions(self):
        assert normalize_patterns(['jpg', '.PNG']) == {'*.jpg', '*.png'}

    def test_globs_kept(self):
        assert normalize_patterns(['IMG_*.jpg', 'scan?.tif']) == {'img_*.jpg', 'scan?.tif'}

    def test_blank_entries_dropped(self):
        assert normalize_patterns(['', '  ', 'gif ']) == {'*.gif'}

    def test_empty(self):
        assert normalize_patterns([]) == frozenset()


class TestFindPhotoFiles:
    """Test find_photo_files function."""

    def test_recursive_and_case_insensitive(self, photo_tree):
        files = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        expected = {str(photo_tree[key].resolve()) for key in ('red', 'red_copy', 'red_again', 'blue')}
        assert set(files) == expected
        assert not any(f.endswith('.txt') for f in files)

    def test_absolute_paths(self, photo_tree):
        files = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        assert all(os.path.isabs(f) for f in files)

    def test_overlapping_patterns_listed_once(self, photo_tree):
        patterns = normalize_patterns(['png', '*.PNG', 'red*', '*'])
        files = find_photo_files(photo_tree['root'], patterns)
        assert len(files) == len(set(files))
        assert files.count(str(photo_tree['red'].resolve())) == 1

    def test_stable_order(self, photo_tree):
        first = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        second = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        assert first == second

    def test_symlink_and_target_listed_once(self, photo_tree):
        link = photo_tree['root'] / "link.png"
        try:
            link.symlink_to(photo_tree['red'])
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")
        files = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        assert files.count(str(photo_tree['red'].resolve())) == 1
        assert len(files) == 4

    def test_broken_symlink_ignored(self, photo_tree):
        link = photo_tree['root'] / "dangling.jpg"
        try:
            link.symlink_to(photo_tree['root'] / "missing.jpg")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")
        files = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        assert len(files) == 4

    def test_no_matches(self, photo_tree):
        assert find_photo_files(photo_tree['root'], normalize_patterns(['cr2'])) == []

    def test_empty_patterns(self, photo_tree):
        assert find_photo_files(photo_tree['root'], frozenset()) == []

    def test_missing_root(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            find_photo_files(temp_dir / "nope", PHOTO_PATTERNS)

    def test_root_is_file(self, photo_tree):
        with pytest.raises(NotADirectoryError):
            find_photo_files(photo_tree['red'], PHOTO_PATTERNS)

    @pytest.mark.skipif(
        not hasattr(os, 'geteuid') or os.geteuid() == 0,
        reason="permission bits are not enforced for root"
    )
    def test_unreadable_directory_skipped(self, photo_tree, caplog):
        locked = photo_tree['root'] / "trips"
        locked.chmod(0)
        try:
            files = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        finally:
            locked.chmod(0o755)
        assert files == [str(photo_tree['red'].resolve())]
        assert "trips" in caplog.text


class TestCalculateFileHash:
    """Test calculate_file_hash function."""

    def test_matches_hashlib(self, photo_tree):
        data = photo_tree['blue'].read_bytes()
        assert calculate_file_hash(photo_tree['blue']) == hashlib.sha256(data).hexdigest()

    def test_identical_files_same_hash(self, photo_tree):
        hash1 = calculate_file_hash(photo_tree['red'])
        hash2 = calculate_file_hash(photo_tree['red_copy'])
        assert hash1 == hash2
        assert len(hash1) == 64  # SHA256 hex length

    def test_different_files_different_hash(self, photo_tree):
        assert calculate_file_hash(photo_tree['red']) != calculate_file_hash(photo_tree['blue'])

    def test_large_file_spans_chunks(self, temp_dir):
        data = os.urandom(200_000)
        path = temp_dir / "big.raw"
        path.write_bytes(data)
        assert calculate_file_hash(path) == hashlib.sha256(data).hexdigest()

    def test_nonexistent_file_raises(self):
        with pytest.raises(OSError):
            calculate_file_hash("/nonexistent/file.jpg")


class TestFingerprintFile:
    """Test fingerprint_file function."""

    def test_record_fields(self, photo_tree):
        path = photo_tree['blue'].resolve()
        record = fingerprint_file(path)

        assert record.full_path == str(path.resolve())
        assert record.file_name == "blue.jpg"
        assert record.directory == str(path.resolve().parent)
        assert record.size_bytes == path.stat().st_size
        assert record.content_hash == hashlib.sha256(path.read_bytes()).hexdigest()
        assert record.last_modified.timestamp() == pytest.approx(path.stat().st_mtime, abs=1e-3)

    def test_missing_file(self, temp_dir):
        missing = temp_dir / "gone.jpg"
        with pytest.raises(FingerprintError) as excinfo:
            fingerprint_file(missing)
        assert excinfo.value.path == str(missing)
        assert isinstance(excinfo.value.cause, FileNotFoundError)
        assert "gone.jpg" in str(excinfo.value)


class TestFingerprintFiles:
    """Test fingerprint_files function."""

    def test_empty_list(self):
        records, stats = fingerprint_files([], show_progress=False)
        assert records == []
        assert stats.total_files == 0
        assert stats.success_rate == 0.0

    def test_keeps_input_order(self, photo_tree):
        paths = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        records, stats = fingerprint_files(paths, show_progress=False)
        assert [r.full_path for r in records] == paths
        assert stats.processed == len(paths)
        assert stats.failed == 0

    def test_parallel_matches_sequential(self, temp_dir):
        paths = []
        for i in range(25):
            path = temp_dir / f"img_{i:02d}.jpg"
            path.write_bytes(bytes([i % 5]) * (100 + i))
            paths.append(str(path))

        sequential, _ = fingerprint_files(paths, max_workers=1, show_progress=False)
        parallel, stats = fingerprint_files(paths, max_workers=4, show_progress=False)

        assert parallel == sequential
        assert stats.processed == 25

    def test_progress_callback(self, photo_tree):
        paths = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        calls = []
        fingerprint_files(paths, show_progress=False,
                          progress_callback=lambda done, total: calls.append((done, total)))
        assert calls == [(i, len(paths)) for i in range(1, len(paths) + 1)]

    def test_warnings_written_through_progress_bar(self, photo_tree, monkeypatch, capsys):
        paths = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        bad = str(photo_tree['blue'].resolve())
        _fail_for(monkeypatch, bad)

        fingerprint_files(paths, show_progress=True)

        err = capsys.readouterr().err
        warning_lines = [line for line in err.splitlines() if bad in line]
        assert warning_lines
        assert all("Hashing files" not in line for line in warning_lines)

    @pytest.mark.parametrize("workers", [1, 3])
    def test_unreadable_file_skipped(self, photo_tree, monkeypatch, caplog, workers):
        paths = find_photo_files(photo_tree['root'], PHOTO_PATTERNS)
        bad = str(photo_tree['blue'].resolve())
        _fail_for(monkeypatch, bad)

        records, stats = fingerprint_files(paths, max_workers=workers, show_progress=False)

        assert len(records) == len(paths) - 1
        assert bad not in [r.full_path for r in records]
        assert stats.failed == 1
        assert stats.failed_paths == [bad]
        assert stats.success_rate == pytest.approx(75.0)
        assert bad in caplog.text
        assert "Permission denied" in caplog.text


class TestGroupByHash:
    """Test grouping and summary functions."""

    def test_first_seen_order(self, make_record):
        records = [
            make_record("/1", "zzz"),
            make_record("/2", "aaa"),
            make_record("/3", "zzz"),
            make_record("/4", "mmm"),
        ]
        groups = group_by_hash(records)

        assert [g.content_hash for g in groups] == ["zzz", "aaa", "mmm"]
        assert [r.full_path for r in groups[0].records] == ["/1", "/3"]

    def test_every_pair_grouped_correctly(self, make_record):
        records = [make_record(f"/{i}", f"h{i % 3}") for i in range(9)]
        groups = group_by_hash(records)
        membership = {r.full_path: g.content_hash for g in groups for r in g.records}
        for a in records:
            for b in records:
                same_group = membership[a.full_path] == membership[b.full_path]
                assert same_group == (a.content_hash == b.content_hash)

    def test_find_duplicate_groups(self, make_record):
        records = [make_record("/1", "a"), make_record("/2", "b"), make_record("/3", "a")]
        duplicates = find_duplicate_groups(group_by_hash(records))
        assert len(duplicates) == 1
        assert duplicates[0].content_hash == "a"

    def test_empty_list(self):
        assert group_by_hash([]) == []
        assert find_duplicate_groups([]) == []

    def test_abc_scenario(self, abc_tree):
        paths = find_photo_files(abc_tree, normalize_patterns(['jpg']))
        records, _ = fingerprint_files(paths, show_progress=False)
        groups = group_by_hash(records)
        summary = summarize_groups(groups, discovered=len(paths))

        assert summary.files_processed == 3
        assert len(groups) == 2
        assert summary.unique_count == 1
        assert summary.duplicate_group_count == 1
        assert summary.total_duplicate_files == 1
        assert summary.wasted_bytes == len(b"X")
        duplicate = find_duplicate_groups(groups)[0]
        assert [Path(r.full_path).name for r in duplicate.records] == ["a.jpg", "c.jpg"]
