# result.py
# Tagged result of a search: Success carries the plan, Failure carries nothing.
# Callers branch on the variant before touching the payload.

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from and_or_search.plan import Plan


class Success(BaseModel):
    """A conditional plan that reaches a goal whichever outcome occurs."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    plan: Plan


class Failure(BaseModel):
    """No conditional plan exists from the searched state."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"


SearchResult = Annotated[Union[Success, Failure], Field(discriminator="kind")]
