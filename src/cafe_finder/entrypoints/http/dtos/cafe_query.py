from pydantic import BaseModel, Field


class CafeQueryDTO(BaseModel):
    """Query parameters for listing cafés.

    All fields stay raw strings so that malformed values reach the use case
    and are reported with the service's own error messages. Built from the
    request by `get_cafe_query`.
    """

    city: str | None = Field(
        default=None,
        description="City key (case-sensitive)",
        examples=["moscow"],
    )
    count: str | None = Field(
        default=None,
        description="Maximum number of cafés to return (non-negative integer). "
        "Ignored when search is given.",
        examples=["2"],
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive substring of the café name",
        examples=["кофе"],
    )
