from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for every DTO (Data Transfer Object) in the project.

    Features:
        - from_attributes=True (build from plain objects)
        - str_strip_whitespace=True (strip surrounding whitespace from strings)
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        populate_by_name=True
    )


# -------------------------------------------------------------------------
# Speech I/O DTOs
# -------------------------------------------------------------------------
class TranscriptChunkDTO(BaseDTO):
    """
    One piece of a streamed transcription.
    Interim chunks may be revised later; only final chunks count as answer text.
    """
    model_config = ConfigDict(str_strip_whitespace=False)

    text: str
    is_final: bool = False
