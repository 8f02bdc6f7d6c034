from pathlib import Path

from app.constants import PromptConfig

PROMPT_DIR = Path(__file__).parent / "prompt" / "user"


def load_instruction(version: str = PromptConfig.DEFAULT_INSTRUCTION_VERSION) -> str:
    """prompt/user/describe_{version}.md 에서 분석 지시문을 읽어옵니다."""
    path = PROMPT_DIR / f"describe_{version}.md"
    return path.read_text(encoding="utf-8").strip()


# promptText가 없거나 비어있을 때 사용하는 기본 지시문
DEFAULT_INSTRUCTION = load_instruction()
