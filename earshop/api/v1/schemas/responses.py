from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Message(BaseModel):
    message: str


class Envelope(BaseModel, Generic[T]):
    result: T
    message: str


class Page(BaseModel, Generic[T]):
    page: int
    limit: int
    result: List[T]
