from __future__ import annotations

from pathlib import Path

import pytest

from msgkit.dist import Dist
from msgkit.infra.config import ConfigAdapter


class FakeRunner:
    """Stands in for ``run_command``: records argv and fakes tool output.

    Any ``--output-file=`` / ``--output=`` argument gets a file written to it
    unless the call is configured to fail.
    """

    def __init__(self, fail_on: int | None = None, returncode: int = 1) -> None:
        self.calls: list[list[str]] = []
        self.files_from: list[list[str]] = []
        self.fail_on = fail_on
        self.returncode = returncode

    def __call__(self, cmd) -> int:
        argv = list(cmd)
        self.calls.append(argv)
        for arg in argv:
            if arg.startswith("--files-from="):
                listing = Path(arg[len("--files-from=") :])
                self.files_from.append(
                    listing.read_text(encoding="utf-8").splitlines()
                )
        if self.fail_on is not None and len(self.calls) - 1 == self.fail_on:
            return self.returncode
        for arg in argv:
            for prefix in ("--output-file=", "--output="):
                if arg.startswith(prefix):
                    Path(arg[len(prefix) :]).write_text(
                        'msgid ""\nmsgstr ""\n', encoding="utf-8"
                    )
        return 0


@pytest.fixture
def dist_config(tmp_path) -> dict:
    """A minimal distribution configured with the LocaleTextDomain plugin."""
    src = tmp_path / "src" / "myapp"
    src.mkdir(parents=True)
    (src / "__init__.py").write_text('_("Hello")\n', encoding="utf-8")
    return {
        "name": "myapp",
        "version": "1.2.3",
        "root": tmp_path,
        "copyright_holder": "Jane Doe",
        "authors": ["Jane Doe <jane@example.com>"],
        "plugins": {"LocaleTextDomain": {"lang_dir": "po"}},
    }


@pytest.fixture
def dist(dist_config) -> Dist:
    return Dist(ConfigAdapter(dist_config))


@pytest.fixture
def lang_dir(tmp_path) -> Path:
    path = tmp_path / "po"
    path.mkdir()
    return path


@pytest.fixture
def tools_available(monkeypatch):
    """Pretend every gettext utility is installed."""
    monkeypatch.setattr("msgkit.plugins.utils.options.can_run", lambda prog: True)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for runners that fail on a given call."""
    return FakeRunner
