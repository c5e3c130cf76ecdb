import pytest
from pathlib import Path
from domain.services.path_classifier import classify

ALLOWED = {"ogg", "flac", "mp3", "wav"}

def test_classify_artist_album_file():
    song = classify({"mp3"}, Path("A/B/song.mp3"))
    assert song is not None
    assert song.filename == "song"
    assert song.extension == "mp3"
    assert song.artist == "A"
    assert song.album == "B"
    assert song.filepath == "A/B/song.mp3"
    assert song.full_path == "A/B/song.mp3"

@pytest.mark.parametrize("rel_path", [
    "song.flac",
    "Artist/song.flac",
    "weird/deep/nested/song.flac",
    "a/b/c/d/e/song.flac",
])
def test_classify_other_depths_fall_back_to_unknown(rel_path):
    song = classify(ALLOWED, rel_path)
    assert song is not None
    assert (song.artist, song.album) == ("Unknown", "Unknown")

@pytest.mark.parametrize("rel_path", [
    "A/B/cover.jpg",
    "A/B/notes.txt",
    "A/B/README",
    "A/B/.hidden",
    "A/B/song.MP3",  # extension match is case-sensitive
])
def test_classify_rejects_non_tracks(rel_path):
    assert classify(ALLOWED, rel_path) is None

def test_classify_empty_extension_set():
    assert classify(set(), "A/B/song.mp3") is None

def test_classify_uses_last_extension():
    song = classify(ALLOWED, "A/B/mix.tar.ogg")
    assert song.extension == "ogg"
    assert song.filename == "mix.tar"

def test_classify_filename_strip_is_textual_replace():
    # every ".mp3" in the name goes, not only the trailing suffix
    song = classify(ALLOWED, "A/B/song.mp3.live.mp3")
    assert song.filename == "song.live"

    song = classify(ALLOWED, "A/B/mp3-remix.mp3")
    assert song.filename == "mp3-remix"

def test_descriptor_with_id():
    song = classify(ALLOWED, "A/B/song.wav").with_id(7)
    assert song.id == 7
    assert song.filename == "song"
    assert song.artist == "A"
