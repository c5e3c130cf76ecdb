from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List
from domain.models.library import LibrarySnapshot
from domain.models.track import Song

router = APIRouter()

def get_library(request: Request) -> LibrarySnapshot:
    """The snapshot built by the startup scan, shared read-only by every request."""
    return request.app.state.library

@router.get("/")
def index(library: LibrarySnapshot = Depends(get_library)):
    return {
        "message": "Musicat is running",
        "songs": len(library),
        "version": library.version,
    }

@router.get("/api/songs", response_model=List[Song])
def list_songs(library: LibrarySnapshot = Depends(get_library)):
    return list(library.songs)

@router.get("/api/songs/{song_id}", response_model=Song)
def get_song(song_id: int, library: LibrarySnapshot = Depends(get_library)):
    song = library.get(song_id)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    return song
