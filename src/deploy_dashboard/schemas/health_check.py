from pydantic import BaseModel, Field


class CheckResult(BaseModel):
    name: str = Field(..., json_schema_extra={"example": "health ok"})
    passed: bool = Field(..., description="True iff the health endpoint answered 200")
    status_code: int = Field(..., json_schema_extra={"example": 200})
