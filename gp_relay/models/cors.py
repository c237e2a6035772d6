# gp_relay/models/cors.py

from typing import Dict, List, Mapping

from pydantic import BaseModel

from gp_relay.config import CORS_ALLOW_METHODS, CORS_ALLOW_ORIGIN, CORS_MAX_AGE


class CorsPolicy(BaseModel):
    allow_origin: str = CORS_ALLOW_ORIGIN
    allow_methods: List[str] = CORS_ALLOW_METHODS
    max_age: int = CORS_MAX_AGE

    def headers_for(self, request_headers: Mapping[str, str]) -> Dict[str, str]:
        """
        Headers set on every response of the CORS-aware route.

        Access-Control-Allow-Headers echoes Access-Control-Request-Headers and is
        left out when the request does not carry a non-empty value.
        """
        methods = ",".join(self.allow_methods)
        headers = {
            "Allow": methods,
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Methods": methods,
            "Access-Control-Max-Age": str(self.max_age),
        }

        requested = request_headers.get("access-control-request-headers")
        if requested:
            headers["Access-Control-Allow-Headers"] = requested

        return headers
