import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from prometheus_fastapi_instrumentator import Instrumentator

from app.container import container
from app.exception import BusinessException
from app.prompt.router import router as prompt_router

# 로거 설정
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # Startup
    logger.info("🚀 Video2Prompt API 시작 중...")
    # 의존성 주입 컨테이너 설정
    container.wire(modules=[__name__])
    yield
    # Shutdown
    logger.info("🔄 Video2Prompt API 종료 중...")


# FastAPI 앱 생성 (lifespan 이벤트 핸들러 포함)
app = FastAPI(
    title="Video2Prompt",
    version="1.0.0",
    lifespan=lifespan
)

Instrumentator().instrument(app).expose(app)


@app.exception_handler(BusinessException)
async def business_exception_handler(request: Request, exc: BusinessException):
    logger.info(
        "business_exception",
        extra={"path": str(request.url), "error_code": exc.error_code, "status_code": exc.status_code},
    )
    # 에러 응답은 본문에 메시지만 담은 plain text
    return PlainTextResponse(status_code=exc.status_code, content=exc.error_message)


# 라우터 등록
app.include_router(prompt_router)


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
