"""
애플리케이션 전역 상수 정의
"""


class VideoConfig:
    """업로드 영상 관련 설정"""
    # inline base64 전송이므로 브라우저/요청 본문 한도를 고려해 18MB로 제한
    MAX_FILE_SIZE_MB = 18
    MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024
    MIME_PREFIX = "video/"


class PromptConfig:
    """프롬프트 생성(Gemini) 관련 설정"""
    DEFAULT_MODEL = "gemini-2.5-flash"
    TEMPERATURE = 0.4
    DEFAULT_INSTRUCTION_VERSION = "v1"
    ENDPOINT_PATH = "/api/generatePrompt"


class CredentialConfig:
    """업스트림 인증 키 환경변수. 앞에 있는 이름이 우선한다."""
    ENV_NAMES = ("GEMINI_API_KEY", "API_KEY")


class ErrorMessages:
    """에러 메시지 상수"""
    # 서버
    METHOD_NOT_ALLOWED = "Method Not Allowed"
    BAD_REQUEST = "Bad Request: expected JSON body { video: { data: base64, mimeType }, promptText }."
    UPSTREAM_EMPTY = "Upstream error: empty response."
    SERVER_ERROR = "Server error"

    # 클라이언트
    INVALID_VIDEO_TYPE = "Please upload a valid video file."
    VIDEO_TOO_LARGE = (
        f"Video is too large. Please use a clip smaller than {VideoConfig.MAX_FILE_SIZE_MB}MB for this demo."
    )
    VIDEO_READ_FAILED = "Failed to read the video file."
    NO_RESPONSE_TEXT = "No response text generated."
    VIDEO_UNSUITABLE = (
        "Failed to process video. It might be too large for the browser-based demo or the format is unsupported. "
        f"Try a smaller file (< {VideoConfig.MAX_FILE_SIZE_MB}MB)."
    )
    ANALYSIS_FAILED = "An unexpected error occurred while analyzing the video."
    ANALYSIS_RETRY = "Failed to analyze video. Please try again."
