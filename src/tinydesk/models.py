from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class RawExtraction(BaseModel):
    """Cleaned list-item strings pulled from the page, in document order."""

    model_config = ConfigDict(frozen=True)

    set_list: Tuple[str, ...] = ()
    musicians: Tuple[str, ...] = ()


class SetListEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    song_number: int = Field(alias="songNumber", ge=1)
    title: str


class MusicianEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    musician_number: int = Field(alias="musicianNumber", ge=1)
    name: str
    instrument: Optional[str] = None


class ConcertRecord(BaseModel):
    """
    The JSON document written for one concert page.

    Python attributes are snake_case; the JSON keys keep the camelCase
    names (``setList``, ``songNumber`` ...) through aliases.
    """

    model_config = ConfigDict(populate_by_name=True)

    artist: str
    source: str
    set_list: List[SetListEntry] = Field(default_factory=list, alias="setList")
    musicians: List[MusicianEntry] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        # instrument is left out entirely when unknown
        return self.model_dump(by_alias=True, exclude_none=True)


class PageDetails(BaseModel):
    """Extra page metadata that is logged but not persisted."""

    story_title: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None
