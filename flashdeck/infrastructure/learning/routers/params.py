"""Path parameters shared by the learning routers."""

from typing import Annotated

from fastapi import Path

from flashdeck.domain.common.value_objects import MAX_INTEGER_ID

SetIdPath = Annotated[
    int, Path(ge=0, le=MAX_INTEGER_ID, description="ID of the flashcard set")
]
