"""Remote listing DTOs.

Pydantic models describing one entry of a repository contents listing.
The listing is validated at the boundary so a malformed field never
reaches record mapping.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class RemoteFileEntry(BaseModel):
    """One file (or directory) in a contents listing.

    Attributes:
        name: File name, including extension.
        download_url: Direct content URL; null for directories.
        html_url: Browser URL of the entry.
        size: Size in bytes.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    name: str
    download_url: str | None
    html_url: str | None = None
    size: int = Field(ge=0)


REMOTE_LISTING_ADAPTER: TypeAdapter[list[RemoteFileEntry]] = TypeAdapter(
    list[RemoteFileEntry]
)
