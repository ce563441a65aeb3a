from pydantic import BaseModel, ConfigDict, Field


class FigmaFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key: str
    name: str
    last_modified: str = Field(default="", alias="lastModified")
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")


class NodeSummary(BaseModel):
    id: str
    name: str
    type: str
    description: str = ""


class ImageExport(BaseModel):
    file_key: str
    node_id: str
    node_name: str
    image_format: str
    scale: int
    url: str


class TypographyToken(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    font_family: str = Field(alias="fontFamily")
    font_size: str = Field(alias="fontSize")
    font_weight: str = Field(alias="fontWeight")


class DesignTokens(BaseModel):
    colors: dict[str, str]
    typography: dict[str, TypographyToken]
    spacing: dict[str, str]
