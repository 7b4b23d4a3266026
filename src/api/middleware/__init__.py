"""Middlewares HTTP do gateway (CORS, corpo, erros, compressão, correlação)."""

from api.middleware.body_limit import BodySizeLimitMiddleware, PayloadTooLargeHTTPException
from api.middleware.correlation import CORRELATION_HEADER, CorrelationIdMiddleware
from api.middleware.cors import CorsPolicy, PolicyCORSMiddleware
from api.middleware.errors import UnhandledErrorMiddleware
from api.middleware.policy import (
    BODY_LIMIT_BYTES,
    HttpPolicy,
    apply_http_policy,
    build_http_policy,
)

__all__ = [
    "BODY_LIMIT_BYTES",
    "CORRELATION_HEADER",
    "BodySizeLimitMiddleware",
    "CorrelationIdMiddleware",
    "CorsPolicy",
    "HttpPolicy",
    "PayloadTooLargeHTTPException",
    "PolicyCORSMiddleware",
    "UnhandledErrorMiddleware",
    "apply_http_policy",
    "build_http_policy",
]
