import json
import logging
import re
from pathlib import Path
from typing import Union

from tinydesk.models import ConcertRecord, MusicianEntry, RawExtraction, SetListEntry

logger = logging.getLogger(__name__)


OUTPUT_SUFFIX = "_info.json"

# ASCII letters and digits only: "Björk!" -> "bjrk", no transliteration
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def parse_musician(index: int, text: str) -> MusicianEntry:
    """
    Split 'Name: Instrument' into its parts.

    Only a single colon counts; 'A: B: C' keeps the whole string as the
    name and gets no instrument.
    """
    parts = text.split(":")
    if len(parts) == 2:
        return MusicianEntry(
            musician_number=index,
            name=parts[0].strip(),
            instrument=parts[1].strip(),
        )
    return MusicianEntry(musician_number=index, name=text.strip())


def build_concert_record(artist: str, source: str, raw: RawExtraction) -> ConcertRecord:
    return ConcertRecord(
        artist=artist.strip(),
        source=source.strip(),
        set_list=[
            SetListEntry(song_number=i, title=song.strip())
            for i, song in enumerate(raw.set_list, start=1)
        ],
        musicians=[
            parse_musician(i, musician)
            for i, musician in enumerate(raw.musicians, start=1)
        ],
    )


def sanitize_artist_name(artist: str) -> str:
    """'Pearl Jam' -> 'pearl_jam'."""
    stem = _NON_WORD_RE.sub("", artist.lower())
    return _WHITESPACE_RE.sub("_", stem)


def output_filename(artist: str) -> str:
    return f"{sanitize_artist_name(artist)}{OUTPUT_SUFFIX}"


def write_record(record: ConcertRecord, output_dir: Union[str, Path] = ".") -> Path:
    """Serialize the record as pretty-printed UTF-8 JSON and return its path."""
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / output_filename(record.artist)

    payload = json.dumps(record.to_json_dict(), ensure_ascii=False, indent=2)
    with out_path.open("w", encoding="utf-8") as f:
        f.write(payload)

    logger.info("Information saved to %s", out_path)
    return out_path
