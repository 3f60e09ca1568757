"""Script and stylesheet loading component."""

from __future__ import annotations

import logging
import posixpath

from themecore.contracts.host import Host

from ..value_objects import AssetDescriptor, evaluate_guard
from .base import ThemeComponent
from .registry import component_registry

logger = logging.getLogger(__name__)


@component_registry.register("asset_loader")
class AssetLoader(ThemeComponent):
    """Enqueue or register configured scripts and styles.

    Configuration keys:
        scripts: List of script entries (handle, src, deps, version,
            footer, enqueue, localize, conditional).
        styles: List of style entries (handle, src, deps, version, media,
            enqueue, conditional).

    Each list is processed on ``wp_enqueue_scripts``. Entries with
    ``enqueue: true`` are enqueued, all others are only registered.
    """

    def setup(self) -> None:
        if "scripts" in self.config:
            self.add_action("wp_enqueue_scripts", self.process_scripts)

        if "styles" in self.config:
            self.add_action("wp_enqueue_scripts", self.process_styles)

    def process_scripts(self, *args: object) -> None:
        for entry in self.config["scripts"]:
            asset = AssetDescriptor.from_config(entry)
            if not evaluate_guard(asset.conditional, self.host):
                logger.debug(f"Skipping script '{asset.handle}': condition not met")
                continue

            load = self.host.enqueue_script if asset.enqueue else self.host.register_script
            load(asset.handle, asset.src, list(asset.deps), asset.version, asset.footer)

            if asset.localize is not None:
                self.host.localize_script(
                    asset.handle, asset.localize.variable, dict(asset.localize.data)
                )

    def process_styles(self, *args: object) -> None:
        for entry in self.config["styles"]:
            asset = AssetDescriptor.from_config(entry)
            if not evaluate_guard(asset.conditional, self.host):
                logger.debug(f"Skipping style '{asset.handle}': condition not met")
                continue

            load = self.host.enqueue_style if asset.enqueue else self.host.register_style
            load(asset.handle, asset.src, list(asset.deps), asset.version, asset.media)


def asset_path(host: Host, path: str) -> str:
    """Resolve a theme-relative asset path to its URL.

    A sibling ``.min.`` file is preferred when it exists in the stylesheet
    directory, unless the ``SCRIPT_DEBUG`` constant is truthy.

    Args:
        host: Host providing the stylesheet directory and URI.
        path: Path relative to the theme root, starting with a slash.

    Returns:
        Absolute URL of the asset.

    Example:
        >>> asset_path(host, "/assets/js/theme.js")  # theme.min.js exists
        'https://example.test/wp-content/themes/child/assets/js/theme.min.js'
    """
    if ".min." not in path:
        directory, filename = posixpath.split(path)
        stem, extension = posixpath.splitext(filename)
        minified = posixpath.join(directory, f"{stem}.min{extension}")
        debug = host.constant("SCRIPT_DEBUG", False)
        if host.file_exists(host.stylesheet_directory() + minified) and not debug:
            path = minified

    return host.stylesheet_directory_uri() + path
