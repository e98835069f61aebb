"""
Shared field types for API schemas.
"""

from typing import Annotated

from pydantic import Field

# Integer columns are 64-bit signed; anything wider is rejected as a bad request.
Int64 = Annotated[int, Field(ge=-2**63, le=2**63 - 1)]
