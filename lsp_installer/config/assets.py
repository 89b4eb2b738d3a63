"""Download URLs for release assets."""

from typing import Mapping, Optional

from .models import AssetDescriptor


def url_maker(language: str, assets: Mapping[str, AssetDescriptor]) -> Optional[str]:
    """Return the release download URL for ``language``, or None if it has no asset."""
    asset = assets.get(language.upper())
    if asset is None:
        return None

    filename = (
        asset.filename.replace("{{NAME}}", asset.name, 1)
        .replace("{{TAG}}", asset.tag, 1)
        .replace("{{OS}}", asset.os, 1)
    )
    return (
        f"https://github.com/{asset.owner}/{asset.name}"
        f"/releases/download/{asset.tag}/{filename}"
    )
