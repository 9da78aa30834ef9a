"""Tests for the image store."""

from pathlib import Path

import pytest

from ga_beacon.adapters.config.app_config import DEFAULT_STATIC_DIR
from ga_beacon.adapters.web.image_store import ImageStore
from ga_beacon.domain.models import IMAGE_VARIANTS, ImageChoice


def test_bundled_images_preload() -> None:
    """Given the bundled static dir, when preloading, then every variant loads."""
    store = ImageStore(DEFAULT_STATIC_DIR)

    store.preload()

    for image in IMAGE_VARIANTS:
        assert store.load(image)


def test_gif_variants_are_gif_files() -> None:
    """Given the bundled GIF variants, when loaded, then they start with the GIF signature."""
    store = ImageStore(DEFAULT_STATIC_DIR)

    for image in IMAGE_VARIANTS:
        data = store.load(image)
        if image.content_type == "image/gif":
            assert data.startswith(b"GIF89a")
        else:
            assert b"<svg" in data


def test_load_caches_bytes(tmp_path: Path) -> None:
    """Given a loaded image, when the file changes, then cached bytes are still served."""
    (tmp_path / "badge.svg").write_bytes(b"<svg>one</svg>")
    store = ImageStore(tmp_path)
    badge = ImageChoice(name="badge", file_name="badge.svg")

    first = store.load(badge)
    (tmp_path / "badge.svg").write_bytes(b"<svg>two</svg>")

    assert store.load(badge) == first == b"<svg>one</svg>"


def test_preload_reports_missing_files(tmp_path: Path) -> None:
    """Given an empty directory, when preloading, then the missing files are named."""
    store = ImageStore(tmp_path)

    with pytest.raises(FileNotFoundError, match="pixel.gif"):
        store.preload()
