import pytest

from nekofetch.util import ansi


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setattr(ansi, "USE_COLOR", False)


@pytest.fixture
def facts():
    return {
        "username": "alice",
        "hostname": "box",
        "os": "Arch Linux",
        "host": "ThinkPad X1",
        "kernel": "6.9.1-arch1-1",
        "uptime": "1 days, 2 hours, 3 mins",
        "shell": "/bin/zsh",
        "terminal": "xterm-256color",
        "cpu": "AMD Ryzen 7 (16 cores)",
        "memory": "4096MiB / 16384MiB",
        "gpu": "Advanced Micro Devices, Inc. [AMD/ATI] Renoir",
        "packages": "1024 (pacman)",
        "resolution": "2560x1440",
        "de": "KDE",
        "wm": "plasma",
        "wm_theme": "Breeze",
        "storage": "/dev/nvme0n1p2: 100MiB / 200MiB",
    }
