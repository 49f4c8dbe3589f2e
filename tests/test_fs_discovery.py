from collections import namedtuple
from pathlib import Path

from cmdwt import fs_discovery
from cmdwt.fs_discovery import find_file, find_win_app, list_drives, probe_drive, static_target
from cmdwt.models import FOUND, INACCESSIBLE, MISSING, LaunchSettings

Partition = namedtuple("Partition", "device mountpoint fstype opts")


def _make_drive(root: Path, package: str = None, file_name: str = None) -> Path:
    apps = root / "Program Files" / "WindowsApps"
    apps.mkdir(parents=True)
    if package:
        pkg = apps / package
        pkg.mkdir()
        if file_name:
            (pkg / file_name).write_text("")
    return root


def test_static_target_is_not_validated():
    settings = LaunchSettings(target_path="Z:\\nowhere\\wt.exe")
    assert static_target(settings) == "Z:\\nowhere\\wt.exe"


def test_single_drive_match(tmp_path):
    drive = _make_drive(tmp_path / "C", "AppX", "target.exe")

    report = find_win_app("target.exe", drives=[str(drive)])

    assert report.found == drive / "Program Files" / "WindowsApps" / "AppX" / "target.exe"
    assert [p.status for p in report.probes] == [FOUND]


def test_not_found_anywhere(tmp_path):
    c = _make_drive(tmp_path / "C", "AppX", "other.exe")
    d = tmp_path / "D"
    d.mkdir()

    report = find_win_app("target.exe", drives=[str(c), str(d)])

    assert report.found is None
    assert [p.status for p in report.probes] == [MISSING, MISSING]


def test_first_drive_wins_and_search_stops(tmp_path):
    c = _make_drive(tmp_path / "C", "Pkg1", "wt.exe")
    d = _make_drive(tmp_path / "D", "Pkg2", "wt.exe")

    report = find_win_app("wt.exe", drives=[str(c), str(d)])

    assert report.found.parent.name == "Pkg1"
    assert len(report.probes) == 1


def test_file_directly_in_windowsapps_is_ignored(tmp_path):
    drive = _make_drive(tmp_path / "C")
    (drive / "Program Files" / "WindowsApps" / "wt.exe").write_text("")

    assert probe_drive(str(drive), "wt.exe").status == MISSING


def test_inaccessible_drive_is_skipped(tmp_path, monkeypatch):
    locked = _make_drive(tmp_path / "C", "Pkg", "wt.exe")
    ok = _make_drive(tmp_path / "D", "Pkg", "wt.exe")
    real_iterdir = Path.iterdir

    def iterdir(self):
        if str(self).startswith(str(locked)):
            raise PermissionError("Access is denied")
        return real_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)

    report = find_win_app("wt.exe", drives=[str(locked), str(ok)])

    assert [p.status for p in report.probes] == [INACCESSIBLE, FOUND]
    assert report.skipped[0].drive == str(locked)
    assert "denied" in report.skipped[0].reason
    assert report.found.parents[3] == ok


def test_find_file_exact_name(tmp_path):
    (tmp_path / "wt.exe.bak").write_text("")
    assert find_file(tmp_path, "wt.exe") is None
    (tmp_path / "wt.exe").write_text("")
    assert find_file(tmp_path, "wt.exe") == tmp_path / "wt.exe"


def test_list_drives_uses_psutil(monkeypatch):
    parts = [Partition("C:\\", "C:\\", "NTFS", "rw"), Partition("E:\\", "E:\\", "", "cdrom")]
    monkeypatch.setattr(fs_discovery.psutil, "disk_partitions", lambda all=False: parts)
    assert list_drives() == ["C:\\", "E:\\"]


def test_list_drives_failure_is_empty(monkeypatch):
    def boom(all=False):
        raise OSError("no drives")

    monkeypatch.setattr(fs_discovery.psutil, "disk_partitions", boom)
    assert list_drives() == []


def test_search_defaults_to_all_drives(tmp_path, monkeypatch):
    drive = _make_drive(tmp_path / "C", "AppX", "target.exe")
    monkeypatch.setattr(fs_discovery, "list_drives", lambda: [str(drive)])
    assert find_win_app("target.exe").found is not None


def test_unreadable_package_skips_only_that_package(tmp_path, monkeypatch):
    drive = _make_drive(tmp_path / "C", "Broken")
    pkg = drive / "Program Files" / "WindowsApps" / "Good"
    pkg.mkdir()
    (pkg / "wt.exe").write_text("")
    real_is_dir = Path.is_dir

    def is_dir(self):
        if self.name == "Broken":
            raise PermissionError("Access is denied")
        return real_is_dir(self)

    monkeypatch.setattr(Path, "is_dir", is_dir)

    probe = probe_drive(str(drive), "wt.exe")

    assert probe.status == FOUND
    assert probe.found
    assert probe.path == pkg / "wt.exe"
