"""Pydantic schemas for the random.org JSON-RPC API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RandomOrgParams(BaseModel):
    """Parameters of a ``generateIntegers`` call yielding one byte per sample."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(..., alias="apiKey", min_length=1, repr=False)
    n: int = Field(..., ge=1, description="Number of byte samples")
    min: int = 0
    max: int = 255
    replacement: bool = True
    base: int = 16


class RandomOrgRequest(BaseModel):
    """JSON-RPC 2.0 request envelope."""

    jsonrpc: str = "2.0"
    method: str = "generateIntegers"
    params: RandomOrgParams
    id: int = 1

    @classmethod
    def for_samples(cls, api_key: str, sample_count: int) -> "RandomOrgRequest":
        return cls(params=RandomOrgParams(api_key=api_key, n=sample_count))

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class RandomOrgError(BaseModel):
    """Error member of a JSON-RPC response."""

    code: Optional[int] = None
    message: str = "Unknown random.org error"
    data: Optional[Any] = None


class RandomOrgRandom(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: List[Any] = Field(default_factory=list)
    completion_time: Optional[str] = Field(None, alias="completionTime")


class RandomOrgResult(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    random: RandomOrgRandom
    bits_used: Optional[int] = Field(None, alias="bitsUsed")
    bits_left: Optional[int] = Field(None, alias="bitsLeft")
    requests_left: Optional[int] = Field(None, alias="requestsLeft")


class RandomOrgResponse(BaseModel):
    """JSON-RPC response carrying either a result or an error."""

    model_config = ConfigDict(extra="allow")

    result: Optional[RandomOrgResult] = None
    error: Optional[RandomOrgError] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None
