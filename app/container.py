from dotenv import load_dotenv

load_dotenv()

from dependency_injector import containers, providers

from app.config import CredentialResolver
from app.constants import CredentialConfig, PromptConfig
from app.prompt.generator import GeminiPromptGenerator
from app.prompt.service import PromptService


class Container(containers.DeclarativeContainer):
    """의존성 주입 컨테이너"""

    # Configuration
    wiring_config = containers.WiringConfiguration(
        packages=[
            "app.prompt",
        ]
    )
    config = providers.Configuration()
    config.gemini.model.from_env("GEMINI_MODEL", default=PromptConfig.DEFAULT_MODEL)
    config.gemini.temperature.from_value(PromptConfig.TEMPERATURE)

    # 인증 키는 요청마다 GEMINI_API_KEY → API_KEY 순으로 조회한다
    credential_resolver = providers.Singleton(
        CredentialResolver,
        names=CredentialConfig.ENV_NAMES,
    )

    # Prompt
    prompt_generator = providers.Factory(
        GeminiPromptGenerator,
        model=config.gemini.model,
    )
    prompt_service = providers.Factory(
        PromptService,
        credential_resolver=credential_resolver,
        generator_factory=prompt_generator.provider,
        temperature=config.gemini.temperature,
    )


# 전역 컨테이너 인스턴스
container = Container()
