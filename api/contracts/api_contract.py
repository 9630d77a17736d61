"""
API Contract Definition for the pagination service

This file defines the expected request/response schemas for all API endpoints.
Clients depend on these shapes; change them only together with the tests.
"""

import logging
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


# ========== Response Models ==========

class PageModel(BaseModel):
    """One entry of the page list"""
    num: Union[int, str] = Field(..., description="Page number, or '...' for an ellipsis")
    url: Optional[str] = Field(None, description="Page URL, null for an ellipsis")
    is_current: bool = Field(..., description="Whether this is the current page")


class PaginationResponse(BaseModel):
    """Response for GET /api/pagination"""
    total_items: int = Field(..., description="Total number of items")
    items_per_page: int = Field(..., description="Items per page")
    current_page: int = Field(..., description="Current page number (1-based, not range checked)")
    num_pages: int = Field(..., description="Total number of pages")
    max_pages_to_show: int = Field(..., description="Window size of the page list")
    url_pattern: str = Field(..., description="URL pattern with (:num) placeholder")
    next_page: Optional[int] = Field(None, description="Next page number or null")
    prev_page: Optional[int] = Field(None, description="Previous page number or null")
    next_url: Optional[str] = Field(None, description="Next page URL or null")
    prev_url: Optional[str] = Field(None, description="Previous page URL or null")
    current_page_first_item: Optional[int] = Field(None, description="1-based index of first item on the page")
    current_page_last_item: Optional[int] = Field(None, description="1-based index of last item on the page")
    pages: List[PageModel] = Field(..., description="Page list with ellipses")


class ErrorResponse(BaseModel):
    """Standard error response format"""
    error: str = Field(..., description="Error message")


# ========== API Contract Registry ==========

class APIContract:
    """Registry of all API contracts that must be preserved"""

    ROUTES = {
        "GET /api/pagination": "JSON pagination metadata",
        "GET /pagination": "HTML pagination control fragment",
    }

    QUERY_PARAMS = {
        "/api/pagination": ["total", "per_page", "page", "max_pages", "url"],
        "/pagination": ["total", "per_page", "page", "max_pages", "url"],
    }

    RESPONSE_SCHEMAS = {
        "GET /api/pagination": PaginationResponse,
        "ERROR": ErrorResponse
    }

    STATUS_CODES = {
        "GET /api/pagination": [200, 400],
        "GET /pagination": [200, 400],
    }

    @classmethod
    def validate_response(cls, endpoint: str, response_data: dict, status_code: int = 200) -> bool:
        """Validate a response matches the contract"""
        if status_code >= 400:
            endpoint = "ERROR"
        if endpoint not in cls.RESPONSE_SCHEMAS:
            return True  # No schema defined, skip validation

        schema = cls.RESPONSE_SCHEMAS[endpoint]
        try:
            schema.model_validate(response_data)
            return True
        except ValidationError as e:
            logger.warning(f"Contract violation for {endpoint}: {e}")
            return False
