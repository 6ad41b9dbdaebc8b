"""Tests for filename classification."""

import pytest

from assetgnome.core.classifier import (
    classify_file,
    get_image_type,
    is_image_file,
    is_subtitle_file,
)
from assetgnome.models.core import ImageType
from assetgnome.models.files import ItemFileType


@pytest.mark.parametrize(
    "name", ["cover.png", "cover.PNG", "a.jpg", "a.JPEG", "poster.webp"]
)
def test_images(name: str) -> None:
    result = classify_file(name)
    assert result.type == ItemFileType.IMAGE
    assert result.image_type == ImageType.PRIMARY


@pytest.mark.parametrize("name", ["movie.srt", "movie.en.SRT", "movie.vtt"])
def test_subtitles(name: str) -> None:
    result = classify_file(name)
    assert result.type == ItemFileType.SUBTITLES
    assert result.image_type is None


@pytest.mark.parametrize(
    "name", ["movie.mkv", "song.mp3", "README", "archive.tar.gz", "cover.png.part"]
)
def test_everything_else_is_media(name: str) -> None:
    result = classify_file(name)
    assert result.type == ItemFileType.MEDIA
    assert result.image_type is None


def test_predicates() -> None:
    assert is_image_file("x.Jpg")
    assert not is_image_file("x.gif")
    assert is_subtitle_file("x.VTT")
    assert not is_subtitle_file("x.ass")


def test_image_type_is_always_primary() -> None:
    assert get_image_type("backdrop.jpg") == ImageType.PRIMARY
