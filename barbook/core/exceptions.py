"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class BarbookException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 조회 실패
class NotFoundException(BarbookException):
    """대상 레코드를 찾을 수 없을 때"""
    def __init__(self, entity: str, key: Any, details: Optional[dict[str, Any]] = None):
        message = f"{entity} not found: {key}"
        super().__init__(message, "NOT_FOUND", details or {"entity": entity, "key": key})


class CocktailNotFoundException(NotFoundException):
    def __init__(self, cocktail_id: Any):
        super().__init__("cocktail", cocktail_id)


class IngredientNotFoundException(NotFoundException):
    def __init__(self, key: Any):
        super().__init__("ingredient", key)


class CatalogItemNotFoundException(NotFoundException):
    def __init__(self, item_id: Any):
        super().__init__("catalog item", item_id)


class ProfileNotFoundException(NotFoundException):
    def __init__(self, user_id: str):
        super().__init__("profile", user_id)


# 유효성 검증 관련 예외
class ValidationException(BarbookException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class ConflictException(BarbookException):
    """중복/충돌 (이미 존재하는 이름 등)"""
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "CONFLICT", details)


# 데이터베이스 관련 예외
class DatabaseException(BarbookException):
    """데이터베이스 관련 예외"""
    def __init__(self, message: str, error_code: str = "DB_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "DB_ERROR", details)


# 인증/권한
class AuthenticationException(BarbookException):
    """호출자 식별 불가"""
    def __init__(self, reason: str = "missing user identity"):
        super().__init__(reason, "UNAUTHENTICATED")


class PermissionDeniedException(BarbookException):
    """역할 권한 부족"""
    def __init__(self, role: str, required: str):
        message = f"Permission denied: role '{role}' but '{required}' required"
        super().__init__(message, "PERMISSION_DENIED", {"role": role, "required": required})
