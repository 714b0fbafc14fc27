from typing import Annotated

from fastapi import Path
from pydantic import Field

# Largest value a signed 64-bit INTEGER column can hold.
MAX_ID = 2**63 - 1

Id = Annotated[int, Field(ge=1, le=MAX_ID)]
IdPath = Annotated[int, Path(ge=1, le=MAX_ID)]
