from typing import Annotated

from pydantic import PlainSerializer

# 64-bit identifiers go out as strings so JavaScript clients keep every digit
BigIntId = Annotated[int, PlainSerializer(lambda v: str(v), return_type=str, when_used="json")]
