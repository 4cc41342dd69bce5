import dataclasses

import pytest

from toollinux.disk_info import DiskInfo, get_disk_info


def test_root_filesystem_sizes():
    info = get_disk_info("/")
    assert info.total_space > 0
    assert info.free_space >= 0
    assert info.available_space >= 0


def test_size_ordering(tmp_path):
    info = get_disk_info(tmp_path)
    assert info.available_space <= info.free_space <= info.total_space


def test_missing_path_raises(tmp_path):
    with pytest.raises(OSError):
        get_disk_info(tmp_path / "does" / "not" / "exist")


def test_disk_info_is_immutable():
    info = DiskInfo(total_space=10, free_space=5, available_space=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.total_space = 1
    assert info == DiskInfo(10, 5, 4)