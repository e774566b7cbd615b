# anilist_querybuilder/dependencies.py

from fastapi import Depends, HTTPException

from .builder import build_request
from .core import QueryRequest
from .params import SearchQueryParams
from .schemas import MediaType


def SearchMediaBuilder(media_type: MediaType):
    def wrapper(params: SearchQueryParams = Depends()) -> QueryRequest:
        try:
            return build_request("SearchMedia", params.to_params(media_type))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid search: {e}")
    return Depends(wrapper)
