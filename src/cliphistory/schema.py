from typing import Dict, Optional

from pydantic import BaseModel, StrictStr, TypeAdapter


class ContentPayload(BaseModel):
    """JSON form of ``GET /api/get``."""

    content: StrictStr


# Body of ``POST /api/set``: an object whose values are all strings.
# null stands for the empty string.
StringMap = TypeAdapter(Dict[str, Optional[StrictStr]])
