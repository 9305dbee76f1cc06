"""Tri-state result of a catalog load."""

from typing import Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class Error(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


class Loaded(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    kind: Literal["loaded"] = "loaded"
    value: T


FetchState = Union[Loading, Error, Loaded]
