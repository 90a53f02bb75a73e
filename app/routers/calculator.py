# =============================================================================
# app/routers/calculator.py - Calculator Endpoints
# =============================================================================
# Simple arithmetic on path parameters, handy for smoke-testing deployments.
# =============================================================================

import math
from typing import Annotated

from fastapi import Path as PathParam
from pydantic import BaseModel

from app.exceptions import InvalidNumbersError
from app.routing import ExpressRouter
from lib.utils import as_json_number, parse_number

router = ExpressRouter()


class AdditionResponse(BaseModel):
    """Addition result. Integral values are emitted without a fraction."""
    operation: str
    a: int | float
    b: int | float
    # None when the sum of two finite operands overflows
    result: int | float | None


@router.get("/add/{a}/{b}", response_model=AdditionResponse)
async def add(
    a: Annotated[str, PathParam(description="First operand, e.g. 5 or 5.5")],
    b: Annotated[str, PathParam(description="Second operand, e.g. 3 or 3.2")],
):
    """
    Add two numbers given as path segments.

    Both segments must be complete decimal literals ("5", "-2.5", "1e3");
    anything else returns 400.
    """
    x = parse_number(a)
    y = parse_number(b)
    if x is None or y is None:
        raise InvalidNumbersError()

    total = x + y
    return AdditionResponse(
        operation="addition",
        a=as_json_number(x),
        b=as_json_number(y),
        result=as_json_number(total) if math.isfinite(total) else None,
    )
