from enum import Enum


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    BUSINESS_NOT_FOUND = "BUSINESS_NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"
