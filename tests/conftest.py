import pytest

from lsp_installer.config.defaults import DEFAULT_ASSETS, DEFAULT_SERVERS
from lsp_installer.config.models import InstallerConfig, Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(root_dir=tmp_path / "root", bin_dir=tmp_path / "bin")


@pytest.fixture
def config(settings):
    return InstallerConfig(
        settings=settings,
        servers=dict(DEFAULT_SERVERS),
        assets=dict(DEFAULT_ASSETS),
    )


@pytest.fixture
def record_commands():
    """Return a helper replacing ``installer._run_command`` with a recorder."""

    def _record(installer, calls, side_effect=None):
        async def _fake_run(cmd, cwd=None, env=None):
            calls.append((cmd, cwd))
            if side_effect is not None:
                side_effect(cmd)

        installer._run_command = _fake_run

    return _record
