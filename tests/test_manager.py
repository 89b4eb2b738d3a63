import asyncio

import pytest

from lsp_installer.config.defaults import DEFAULT_SERVERS
from lsp_installer.config.models import InstallerConfig
from lsp_installer.core.manager import InstallManager, Operation
from lsp_installer.installers import BaseInstaller, InstallationError, build_installer


class _DummyInstaller(BaseInstaller):
    def __init__(self, language, settings, fail=False):
        super().__init__(language, settings)
        self.fail = fail
        self.calls = []

    async def install(self):
        self.calls.append("install")
        if self.fail:
            raise InstallationError(f"{self.language} broke")

    async def update(self):
        self.calls.append("update")


def test_resolve_unknown_language_yields_nothing(config):
    assert InstallManager(config).resolve(["doesnotexist"]) == []


def test_resolve_all_matches_builder_over_registry(config):
    manager = InstallManager(config)
    expected = [
        language
        for language, server in config.servers.items()
        if build_installer(language, server, config) is not None
    ]

    installers = manager.resolve(["all"])

    assert [i.language for i in installers] == expected
    assert expected == list(DEFAULT_SERVERS)


def test_resolve_all_drops_release_language_without_asset(settings):
    config = InstallerConfig(settings=settings, servers=dict(DEFAULT_SERVERS))
    languages = [i.language for i in InstallManager(config).resolve(["all"])]
    assert "lua" not in languages
    assert "vim" in languages


def test_resolve_deduplicates_and_keeps_order(config):
    manager = InstallManager(config)
    installers = manager.resolve(["go", "nope", "vim", "go", "all"])
    languages = [i.language for i in installers]
    assert languages[:2] == ["go", "vim"]
    assert sorted(languages) == sorted(DEFAULT_SERVERS)


def test_run_collects_failures_without_stopping_others(settings, config):
    good = _DummyInstaller("vim", settings)
    bad = _DummyInstaller("lua", settings, fail=True)

    report = asyncio.run(InstallManager(config).run(Operation.INSTALL, [bad, good]))

    assert report.succeeded == ["vim"]
    assert list(report.failed) == ["lua"]
    assert not report.ok
    assert good.calls == ["install"]


def test_run_dispatches_update(settings, config):
    installer = _DummyInstaller("vim", settings)

    report = asyncio.run(InstallManager(config).run("update", [installer]))

    assert report.ok
    assert installer.calls == ["update"]


def test_run_rejects_unknown_operation(settings, config):
    with pytest.raises(ValueError):
        asyncio.run(InstallManager(config).run("remove", []))
