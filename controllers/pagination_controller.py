"""
PaginationController - Handles pagination requests

Parses and validates query parameters, builds a paginator through the
PaginationService and returns either JSON metadata or the HTML control.
A fresh paginator is built for every request.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union

from flask import request

from pagination import PaginationService, Paginator

logger = logging.getLogger(__name__)


def _int_arg(name: str, default: Optional[int] = None, minimum: Optional[int] = None) -> Optional[int]:
    """Read an integer query parameter, raising ValueError on bad input."""
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"'{name}' must be an integer") from None
    if minimum is not None and value < minimum:
        raise ValueError(f"'{name}' must be at least {minimum}")
    return value


class PaginationController:
    """Controller for pagination endpoints"""

    def __init__(self, service: Optional[PaginationService] = None):
        self.service = service or PaginationService()

    def _paginator_from_request(self) -> Paginator:
        total = _int_arg("total", minimum=0)
        if total is None:
            raise ValueError("'total' is required")

        return self.service.create_paginator(
            total,
            page=_int_arg("page", default=1),
            per_page=_int_arg("per_page", minimum=0),
            url_pattern=request.args.get("url") or None,
            max_pages_to_show=_int_arg("max_pages"),
        )

    def get_pagination(self) -> Union[Dict[str, Any], Tuple[Dict[str, Any], int]]:
        """
        GET /api/pagination?total=1000&per_page=50&page=8&max_pages=10&url=/items/(:num)

        Returns pagination metadata as JSON-serializable dict.
        """
        try:
            paginator = self._paginator_from_request()
        except ValueError as e:
            logger.warning(f"Rejected pagination request {dict(request.args)}: {e}")
            return {"error": str(e)}, 400

        return self.service.calculate_pagination(paginator)

    def render_pagination(self) -> Tuple[str, int, Dict[str, str]]:
        """
        GET /pagination?total=1000&per_page=50&page=8

        Returns the HTML pagination control, empty when there is a single page.
        """
        html_headers = {"Content-Type": "text/html; charset=utf-8"}
        try:
            paginator = self._paginator_from_request()
        except ValueError as e:
            logger.warning(f"Rejected pagination request {dict(request.args)}: {e}")
            return str(e), 400, {"Content-Type": "text/plain; charset=utf-8"}

        return str(self.service.render_html(paginator)), 200, html_headers
