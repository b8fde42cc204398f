from collections import namedtuple

import pytest

from nekofetch.context import probes, system
from nekofetch.context.probes import UNKNOWN

KEYS = {
    "username", "hostname", "os", "host", "kernel", "uptime", "shell",
    "terminal", "cpu", "memory", "gpu", "packages", "resolution", "de",
    "wm", "wm_theme", "storage",
}

VMem = namedtuple("VMem", "total available")
Usage = namedtuple("Usage", "total used free percent")
Part = namedtuple("Part", "device mountpoint fstype opts")

MIB = 1024 * 1024


@pytest.fixture
def no_commands(monkeypatch):
    monkeypatch.setattr(probes, "_run", lambda cmd, timeout=10: "")


def test_format_uptime():
    assert system.format_uptime(0) == "0 days, 0 hours, 0 mins"
    assert system.format_uptime(2 * 86400 + 5 * 3600 + 7 * 60 + 59) == "2 days, 5 hours, 7 mins"


def test_memory(monkeypatch):
    monkeypatch.setattr(system.psutil, "virtual_memory",
                        lambda: VMem(total=16384 * MIB, available=12288 * MIB))
    assert system.memory() == "4096MiB / 16384MiB"


def test_storage_root_device(monkeypatch):
    monkeypatch.setattr(system, "_system_root", lambda: "/")
    monkeypatch.setattr(system.psutil, "disk_usage",
                        lambda p: Usage(total=200 * MIB, used=90 * MIB, free=100 * MIB, percent=50.0))
    monkeypatch.setattr(system.psutil, "disk_partitions", lambda all=False: [
        Part("/dev/sda1", "/boot", "vfat", "rw"),
        Part("/dev/nvme0n1p2", "/", "ext4", "rw"),
    ])
    assert system.storage() == "/dev/nvme0n1p2: 100MiB / 200MiB"


def test_cpu_uses_brand_and_logical_cores(monkeypatch):
    monkeypatch.setattr(system, "cpu_brand", lambda plat: "AMD Ryzen 7 5800U")
    monkeypatch.setattr(system.psutil, "cpu_count", lambda logical=True: 16)
    assert system.cpu("linux") == "AMD Ryzen 7 5800U (16 cores)"


def test_cpu_brand_unknown_when_unreadable(monkeypatch):
    def broken(plat):
        raise OSError("no /proc")
    monkeypatch.setattr(system, "cpu_brand", broken)
    monkeypatch.setattr(system.psutil, "cpu_count", lambda logical=True: 4)
    assert system.cpu("linux") == "Unknown (4 cores)"


def test_cpu_brand_from_proc(monkeypatch):
    monkeypatch.setattr(system, "_read_file", lambda path: (
        "processor\t: 0\nvendor_id\t: GenuineIntel\n"
        "model name\t: Intel(R) Core(TM) i7-8550U CPU @ 1.80GHz\n"
    ))
    assert system.cpu_brand("linux") == "Intel(R) Core(TM) i7-8550U CPU @ 1.80GHz"


def test_desktop_facts_by_platform(monkeypatch, no_commands):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "GNOME")
    monkeypatch.setenv("XDG_SESSION_DESKTOP", "gnome")
    assert system.desktop_environment("linux") == "GNOME"
    assert system.window_manager("linux") == "gnome"
    assert system.desktop_environment("darwin") == "Aqua"
    assert system.window_manager("darwin") == "Quartz Compositor"
    assert system.wm_theme("darwin") == "Blue (Dark)"
    assert system.wm_theme("linux") == UNKNOWN
    assert system.desktop_environment("windows") == ""


def test_gather_has_every_key(monkeypatch, no_commands):
    monkeypatch.delenv("XDG_CURRENT_DESKTOP", raising=False)
    monkeypatch.delenv("DESKTOP_SESSION", raising=False)
    monkeypatch.delenv("XDG_SESSION_DESKTOP", raising=False)
    info = system.gather_system_info("linux")
    assert set(info) == KEYS
    assert all(isinstance(v, str) and v for v in info.values())
    for key in ("gpu", "packages", "resolution", "wm_theme", "de", "wm"):
        assert info[key] == UNKNOWN


def test_gather_missing_env_and_failing_apis(monkeypatch, no_commands):
    for var in ("SHELL", "ComSpec", "TERM_PROGRAM", "TERM"):
        monkeypatch.delenv(var, raising=False)

    def boom(*a, **kw):
        raise RuntimeError("unsupported")
    monkeypatch.setattr(system.psutil, "virtual_memory", boom)
    monkeypatch.setattr(system.psutil, "boot_time", boom)
    monkeypatch.setattr(system.psutil, "disk_usage", boom)
    monkeypatch.setattr(system.getpass, "getuser", boom)

    info = system.gather_system_info("plan9")
    assert info["shell"] == UNKNOWN
    assert info["terminal"] == UNKNOWN
    assert info["memory"] == UNKNOWN
    assert info["uptime"] == UNKNOWN
    assert info["storage"] == UNKNOWN
    assert info["username"] == UNKNOWN
    assert info["gpu"] == UNKNOWN


def test_shell_falls_back_to_comspec(monkeypatch, no_commands):
    monkeypatch.delenv("SHELL", raising=False)
    monkeypatch.setenv("ComSpec", r"C:\Windows\system32\cmd.exe")
    monkeypatch.setenv("TERM", "xterm")
    monkeypatch.delenv("TERM_PROGRAM", raising=False)
    info = system.gather_system_info("windows")
    assert info["shell"] == r"C:\Windows\system32\cmd.exe"
    assert info["terminal"] == "xterm"


def fake_files(files):
    def read(path):
        if path not in files:
            raise FileNotFoundError(path)
        return files[path]
    return read


DMI = "/sys/devices/virtual/dmi/id/"


@pytest.mark.parametrize("files,expected", [
    ({DMI + "product_name": "20KHCTO1WW\n", DMI + "sys_vendor": "LENOVO\n"}, "LENOVO 20KHCTO1WW"),
    ({DMI + "product_name": "Dell XPS 13 9310\n", DMI + "sys_vendor": "Dell\n"}, "Dell XPS 13 9310"),
    ({DMI + "product_name": "Standard PC (Q35 + ICH9, 2009)\n"}, "Standard PC (Q35 + ICH9, 2009)"),
    ({"/proc/device-tree/model": "Raspberry Pi 4 Model B Rev 1.4\x00"}, "Raspberry Pi 4 Model B Rev 1.4"),
    ({}, ""),
])
def test_host_model_linux(monkeypatch, files, expected):
    monkeypatch.setattr(system, "_read_file", fake_files(files))
    assert system.host_model("linux") == expected


@pytest.mark.parametrize("plat,outputs,expected", [
    ("darwin", {"sysctl": "MacBookPro18,3\n"}, "MacBookPro18,3"),
    ("windows", {"wmic": "Model\r\n\r\nSurface Laptop 4\r\n"}, "Surface Laptop 4"),
    ("darwin", {}, UNKNOWN),
])
def test_host_model_from_commands(monkeypatch, plat, outputs, expected):
    monkeypatch.setattr(probes, "_run", lambda cmd, timeout=10: outputs.get(cmd[0], ""))
    assert system.host_model(plat) == expected


def test_os_name_per_platform(monkeypatch):
    monkeypatch.setattr(system.distro, "name", lambda pretty=False: "Debian GNU/Linux 12 (bookworm)")
    monkeypatch.setattr(system.platform, "mac_ver", lambda: ("14.4.1", ("", "", ""), "arm64"))
    monkeypatch.setattr(system.platform, "release", lambda: "10")
    monkeypatch.setattr(system.platform, "version", lambda: "10.0.19045")
    monkeypatch.setattr(system.platform, "system", lambda: "FreeBSD")
    assert system.os_name("linux") == "Debian GNU/Linux 12 (bookworm)"
    assert system.os_name("darwin") == "macOS 14.4.1"
    assert system.os_name("windows") == "Windows 10 10.0.19045"
    assert system.os_name("freebsd14") == "FreeBSD 10"


def test_os_name_linux_without_distro_name(monkeypatch):
    monkeypatch.setattr(system.distro, "name", lambda pretty=False: "")
    monkeypatch.setattr(system.platform, "system", lambda: "Linux")
    monkeypatch.setattr(system.platform, "release", lambda: "6.9.1")
    assert system.os_name("linux") == "Linux 6.9.1"


@pytest.mark.parametrize("plat,outputs,expected", [
    ("darwin", {"sysctl": "Apple M1 Pro\n"}, "Apple M1 Pro"),
    ("windows", {"wmic": "Name\r\n\r\nIntel(R) Core(TM) i5-1135G7 @ 2.40GHz\r\n"},
     "Intel(R) Core(TM) i5-1135G7 @ 2.40GHz"),
    ("windows", {}, "x86_64 Family"),
])
def test_cpu_brand_from_commands(monkeypatch, plat, outputs, expected):
    monkeypatch.setattr(probes, "_run", lambda cmd, timeout=10: outputs.get(cmd[0], ""))
    monkeypatch.setattr(system.platform, "processor", lambda: "x86_64 Family")
    assert system.cpu_brand(plat) == expected
