from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Acknowledgement returned by write endpoints."""

    message: str


class ErrorResponse(BaseModel):
    """Body of every 400 and 500 response."""

    error: str
