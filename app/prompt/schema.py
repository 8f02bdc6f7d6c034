from typing import Any, Optional

from pydantic import BaseModel, Field, StrictStr, field_validator


class VideoPayload(BaseModel):
    """base64로 인코딩된 영상"""
    data: StrictStr = Field(..., description="base64 인코딩된 영상 바이트")
    mime_type: StrictStr = Field(..., alias="mimeType", description="영상 MIME 타입 (video/*)")


class PromptRequest(BaseModel):
    """프롬프트 생성 요청"""
    video: VideoPayload = Field(..., description="영상")
    prompt_text: Optional[str] = Field(None, alias="promptText", description="기본 지시문을 대체할 지시문")

    @field_validator("prompt_text", mode="before")
    @classmethod
    def _ignore_non_string(cls, value: Any) -> Optional[str]:
        # 문자열이 아닌 promptText는 지정되지 않은 것으로 본다
        return value if isinstance(value, str) else None


class PromptResponse(BaseModel):
    """프롬프트 생성 응답"""
    prompt: str = Field(..., description="생성된 프롬프트 (앞뒤 공백 제거)")


class InlineVideo(BaseModel):
    """업스트림에 그대로 실어 보낼 디코딩된 영상"""
    data: bytes = Field(..., description="영상 바이트")
    mime_type: str = Field(..., description="영상 MIME 타입")
