from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request

from app.constants import PromptConfig
from app.container import Container
from app.prompt.schema import PromptResponse
from app.prompt.service import PromptService

router = APIRouter()

# POST 이외의 메서드도 받아서 서비스에서 405로 변환한다
ACCEPTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route(PromptConfig.ENDPOINT_PATH, methods=ACCEPTED_METHODS, response_model=PromptResponse)
@inject
async def generate_prompt(
    request: Request,
    prompt_service: PromptService = Depends(Provide[Container.prompt_service]),
) -> PromptResponse:
    """업로드된 영상(base64)으로 이미지/영상 생성용 프롬프트를 만듭니다."""
    raw_body = await request.body()
    return await prompt_service.generate(request.method, raw_body)
