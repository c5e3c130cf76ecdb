import os
import pytest
from domain.services.library_crawler import crawl_dir

ALLOWED = ["ogg", "flac", "mp3", "wav"]

def test_crawl_collects_tracks_relative_to_base(tmp_path, make_tree):
    make_tree(tmp_path, [
        "Artist/Album/01.mp3",
        "Artist/Album/02.flac",
        "Artist/Album/cover.jpg",
        "Loose/track.ogg",
        "top.wav",
        "Other/Live/2019/show.mp3",
    ])

    songs = crawl_dir(ALLOWED, tmp_path, tmp_path)

    by_path = {s.filepath: s for s in songs}
    assert set(by_path) == {
        "Artist/Album/01.mp3",
        "Artist/Album/02.flac",
        "Loose/track.ogg",
        "top.wav",
        "Other/Live/2019/show.mp3",
    }
    assert by_path["Artist/Album/01.mp3"].artist == "Artist"
    assert by_path["Artist/Album/01.mp3"].album == "Album"
    assert by_path["Other/Live/2019/show.mp3"].artist == "Unknown"
    assert by_path["top.wav"].album == "Unknown"

def test_crawl_subdirectory_keeps_base_relative_paths(tmp_path, make_tree):
    make_tree(tmp_path, ["Artist/Album/01.mp3", "Else/x/y.mp3"])

    songs = crawl_dir(ALLOWED, tmp_path, tmp_path / "Artist")

    assert [s.filepath for s in songs] == ["Artist/Album/01.mp3"]

def test_crawl_non_directory_returns_empty(tmp_path, make_tree):
    make_tree(tmp_path, ["A/B/song.mp3"])

    assert crawl_dir(ALLOWED, tmp_path, tmp_path / "A/B/song.mp3") == []
    assert crawl_dir(ALLOWED, tmp_path, tmp_path / "missing") == []

def test_crawl_empty_tree(tmp_path):
    assert crawl_dir(ALLOWED, tmp_path, tmp_path) == []

def test_crawl_unreadable_directory_fails_whole_scan(tmp_path, make_tree, mocker):
    make_tree(tmp_path, ["Good/Album/ok.mp3", "Bad/Album/hidden.mp3"])
    bad_dir = str(tmp_path / "Bad")
    real_scandir = os.scandir

    def scandir(path):
        if os.fspath(path) == bad_dir:
            raise PermissionError(13, "Permission denied", bad_dir)
        return real_scandir(path)

    mocker.patch("domain.services.library_crawler.os.scandir", side_effect=scandir)

    with pytest.raises(PermissionError):
        crawl_dir(ALLOWED, tmp_path, tmp_path)
