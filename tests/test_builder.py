import asyncio

from lsp_installer.config.models import ReleaseArchiveServer
from lsp_installer.installers import (
    PackageManagerInstaller,
    ReleaseArchiveInstaller,
    ToolchainInstaller,
    build_installer,
)


def test_package_manager_server_builds_npm_installer(config):
    installer = build_installer("vim", config.servers["vim"], config)
    assert isinstance(installer, PackageManagerInstaller)
    assert installer.package == "vim-language-server"
    assert installer.link_path == config.settings.bin_dir / "vim-language-server"


def test_package_manager_bin_overrides_package_name(config):
    installer = build_installer("css", config.servers["css"], config)
    assert installer.package == "vscode-langservers-extracted"
    assert installer.shim_path == (
        config.settings.root_dir / "node_modules" / ".bin" / "vscode-css-language-server"
    )


def test_release_server_builds_archive_installer(config):
    installer = build_installer("lua", config.servers["lua"], config)
    assert isinstance(installer, ReleaseArchiveInstaller)
    assert installer.source == config.settings.root_dir / "lua/bin/lua-language-server"
    assert installer.target == config.settings.bin_dir / "lua-language-server"
    assert installer.url.endswith("lua-language-server-3.6.4-linux-x64.tar.gz")


def test_release_server_without_link_fields_is_skipped(config):
    server = ReleaseArchiveServer(package="lua-language-server")
    assert build_installer("lua", server, config) is None


def test_release_server_without_asset_is_skipped(config):
    server = ReleaseArchiveServer(
        package="zls", source_path="zig/zls", link_target="zls"
    )
    assert build_installer("zig", server, config) is None


def test_toolchain_update_runs_same_command_as_install(config, record_commands):
    installer = build_installer("go", config.servers["go"], config)
    assert isinstance(installer, ToolchainInstaller)

    calls = []
    record_commands(installer, calls)
    asyncio.run(installer.install())
    asyncio.run(installer.update())

    expected = ["go", "install", "golang.org/x/tools/gopls@latest"]
    assert [cmd for cmd, _ in calls] == [expected, expected]
