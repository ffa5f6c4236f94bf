from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, constr


class BookBase(BaseModel):
    title: constr(strip_whitespace=True, min_length=1)
    author: constr(strip_whitespace=True, min_length=1)
    total_copies: int = Field(ge=0)


class BookCreate(BookBase):
    borrowed_copies: int = Field(default=0, ge=0)


class BookUpdate(BookBase):
    """Replacement values for an existing book; ``borrowed_copies`` is never taken from here."""


class BookOut(BaseModel):
    # no input constraints here; whatever is stored must always be listable
    id: int
    title: str
    author: str
    total_copies: int
    borrowed_copies: int

    model_config = ConfigDict(from_attributes=True)


class BaseResponse(BaseModel):
    timestamp: datetime = Field(default_factory=datetime.now)
    status_code: int
    response_message: str

    model_config = ConfigDict(frozen=True)


class ResponseResult(BaseResponse):
    # dropped from the JSON body when None (routes use response_model_exclude_none)
    query_result: Optional[List[Any]] = None


class ResponseError(BaseResponse):
    pass
