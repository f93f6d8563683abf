"""Remote descriptor parsed from the origin remote URL."""

from pydantic import BaseModel


class RemoteDescriptor(BaseModel):
    """Host and owner/repo path of a repository remote."""

    model_config = {"frozen": True}

    host: str
    full_name: str
