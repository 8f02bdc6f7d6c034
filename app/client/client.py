import logging
from typing import Optional

import httpx

from app.client.exception import EmptyResultError, UpstreamError
from app.constants import PromptConfig
from app.prompt.schema import PromptRequest, VideoPayload


class PromptClient:
    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.base_url = base_url
        # 코어에서는 타임아웃을 두지 않는다. 필요하면 호출하는 쪽에서 지정
        self.timeout = timeout
        self.transport = transport

    async def request_prompt(self, payload: VideoPayload, override_text: Optional[str] = None) -> str:
        body = PromptRequest(video=payload, promptText=override_text).model_dump(by_alias=True, exclude_none=True)

        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            self.logger.info(f"[PromptClient] ▶ 프롬프트 생성 요청 | url={self.base_url}{PromptConfig.ENDPOINT_PATH}")
            resp = await client.post(PromptConfig.ENDPOINT_PATH, json=body)

        if not resp.is_success:
            self.logger.warning(f"[PromptClient] ▶ 요청 실패 | status={resp.status_code} | body={resp.text[:500]}")
            raise UpstreamError(resp.text or f"Request failed: {resp.status_code}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError:
            raise EmptyResultError()

        prompt = data.get("prompt") if isinstance(data, dict) else None
        if not isinstance(prompt, str) or not prompt.strip():
            raise EmptyResultError()

        return prompt.strip()
