"""Common HTTP Schemas."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """메시지 응답."""

    message: str = Field(..., description="사용자 메시지")


class ErrorResponse(BaseModel):
    """에러 응답."""

    detail: str = Field(..., description="에러 메시지")
    code: str = Field(..., description="에러 코드")
