from typing import Annotated, Literal

from pydantic import BaseModel, StringConstraints

# Matches a "required" check: present and not empty
RequiredStr = Annotated[str, StringConstraints(min_length=1)]

PostStatus = Literal["draft", "published"]


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str
