"""Built-in server and asset registries."""

from types import MappingProxyType

from .models import (
    AssetDescriptor,
    PackageManagerServer,
    ReleaseArchiveServer,
    ToolchainServer,
)

DEFAULT_SERVERS = MappingProxyType(
    {
        "lua": ReleaseArchiveServer(
            package="lua-language-server",
            source_path="lua/bin/lua-language-server",
            link_target="lua-language-server",
        ),
        "vim": PackageManagerServer(package="vim-language-server"),
        "bash": PackageManagerServer(package="bash-language-server"),
        "go": ToolchainServer(package="golang.org/x/tools/gopls"),
        "python": PackageManagerServer(package="pyright"),
        "css": PackageManagerServer(
            package="vscode-langservers-extracted",
            bin="vscode-css-language-server",
        ),
        "json": PackageManagerServer(
            package="vscode-langservers-extracted",
            bin="vscode-json-language-server",
        ),
    }
)

DEFAULT_ASSETS = MappingProxyType(
    {
        "LUA": AssetDescriptor(
            owner="sumneko",
            name="lua-language-server",
            tag="3.6.4",
            os="linux-x64",
            filename="{{NAME}}-{{TAG}}-{{OS}}.tar.gz",
        ),
    }
)
