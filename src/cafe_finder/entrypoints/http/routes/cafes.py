from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from cafe_finder.entrypoints.http.dependencies import (
    get_cafe_query,
    get_list_cafes_use_case,
)
from cafe_finder.entrypoints.http.dtos.cafe_query import CafeQueryDTO
from cafe_finder.entrypoints.http.mappers.cafe_query_mapper import CafeQueryMapper
from cafe_finder.use_cases.list_cafes import ListCafes


router = APIRouter(tags=["Cafés"])


@router.get(
    "/cafe",
    response_class=PlainTextResponse,
    summary="List cafés in a city",
    description="""
    List cafés of a city in catalog order.

    ## Parameters
    - `city` is required and must be a known city key
    - `count` limits the result to the first N cafés
    - `search` keeps cafés whose name contains the term (case-insensitive);
      `count` is ignored when `search` is given

    ## Example
    ```
    GET /cafe?city=moscow&count=2
    ```
    """,
    responses={
        200: {
            "description": "Comma-separated café names (empty when nothing matches)",
            "content": {"text/plain": {"example": "Мир кофе,Сладкоежка"}},
        },
        400: {
            "description": "Unknown city or malformed count",
            "content": {"text/plain": {"example": "unknown city"}},
        },
    },
)
def get_cafes(
    query: CafeQueryDTO = Depends(get_cafe_query),
    use_case: ListCafes = Depends(get_list_cafes_use_case),
) -> PlainTextResponse:
    """List cafés endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CafeQueryMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return PlainTextResponse(CafeQueryMapper.to_response(result))
