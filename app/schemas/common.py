from pydantic import BaseModel
from typing import Optional

class MessageResponse(BaseModel):
    message: str
    changes: Optional[int] = None

class ErrorResponse(BaseModel):
    error: str
