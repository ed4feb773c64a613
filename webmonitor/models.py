from pydantic import BaseModel, StrictBool, StrictInt, StrictStr
from typing import Optional

class Service(BaseModel):
    name: StrictStr
    url: StrictStr
    status: StrictBool = False

class AddServiceRequest(BaseModel):
    # Missing keys decode as empty strings and are rejected as "name/url required"
    name: StrictStr = ""
    url: StrictStr = ""

class RemoveServiceRequest(BaseModel):
    index: StrictInt

class OperationResult(BaseModel):
    success: bool
    error: Optional[str] = None
