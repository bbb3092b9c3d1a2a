from .client import SecretaryClient
from .types import (
    SecretaryClientConfig,
    TemplateExtractionRequest,
    TemplateExtractionResponse,
)

__all__ = [
    "SecretaryClient",
    "SecretaryClientConfig",
    "TemplateExtractionRequest",
    "TemplateExtractionResponse",
]
