import os
import sys
import types

import pytest

from toollinux.system_info import architecture, kernel_version, os_name, read_cpu_model


@pytest.fixture
def fake_linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    fake = types.SimpleNamespace(sysname="FakeOS", release="9.9.9-test", machine="fakearch")
    monkeypatch.setattr(os, "uname", lambda: fake, raising=False)


def test_linux_fields(fake_linux):
    assert os_name() == "FakeOS"
    assert kernel_version() == "9.9.9-test"
    assert architecture() == "fakearch"


def test_unsupported_platform(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    assert os_name() == "Unsupported OS"
    assert kernel_version() == "Unsupported OS"
    assert architecture() == "Unsupported OS"


def test_uname_failure_is_unknown(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")

    def failing():
        raise OSError("uname failed")

    monkeypatch.setattr(os, "uname", failing, raising=False)
    assert os_name() == "Unknown"
    assert kernel_version() == "Unknown"


def test_read_cpu_model(tmp_path):
    cpuinfo = tmp_path / "cpuinfo"
    cpuinfo.write_text(
        "processor\t: 0\n"
        "vendor_id\t: FakeVendor\n"
        "model name\t: Fake CPU @ 2.00GHz\n"
        "processor\t: 1\n"
        "model name\t: Second CPU\n",
        encoding="utf-8",
    )
    assert read_cpu_model(cpuinfo) == "Fake CPU @ 2.00GHz"


def test_read_cpu_model_absent_entry(tmp_path):
    cpuinfo = tmp_path / "cpuinfo"
    cpuinfo.write_text("processor\t: 0\nflags\t: fpu\n", encoding="utf-8")
    assert read_cpu_model(cpuinfo) is None


def test_read_cpu_model_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_cpu_model(tmp_path / "nope")