from __future__ import annotations

from cafe_finder.entrypoints.http.dtos.cafe_query import CafeQueryDTO
from cafe_finder.use_cases.list_cafes import ListCafesRequest, ListCafesResponse


class CafeQueryMapper:
    """Maps between the HTTP query and the list-cafés use case."""

    separator = ","

    @staticmethod
    def to_domain_request(dto: CafeQueryDTO) -> ListCafesRequest:
        """
        Builds the domain request from query parameters.

        Values are passed through unparsed; validation belongs to the use case.
        """
        return ListCafesRequest(city=dto.city, count=dto.count, search=dto.search)

    @staticmethod
    def to_response(result: ListCafesResponse) -> str:
        """
        Renders café names as a comma-separated list.

        No padding and no trailing separator; an empty result renders as "".
        """
        return CafeQueryMapper.separator.join(result.names)
