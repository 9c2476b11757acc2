from .response_wrappers import ApiModel, ErrorResponse, SuccessResponse

__all__ = [
    "ApiModel",
    "ErrorResponse",
    "SuccessResponse",
]
