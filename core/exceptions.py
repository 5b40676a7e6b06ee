"""
core/exceptions.py - 예외 계층 구조

수집 파이프라인 전체에서 사용되는 예외 클래스들을 정의합니다.
모든 예외는 복구되지 않고 CLI까지 전파되어 프로세스를 종료시킵니다.

예외 계층 구조:
    CollectorError (베이스)
    ├── ConfigurationError (필수 환경변수 누락)
    └── RemoteQueryError (ELB/EC2 API 호출 실패)

Usage:
    from core.exceptions import RemoteQueryError

    try:
        response = elb.describe_load_balancers(LoadBalancerNames=names)
    except ClientError as e:
        raise RemoteQueryError.from_client_error(
            service="elb",
            operation="describe_load_balancers",
            target=",".join(names),
            client_error=e,
        ) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class CollectorError(Exception):
    """수집기 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigurationError(CollectorError):
    """필수 설정값 누락 예외

    원격 호출 이전, 설정 로드 단계에서만 발생합니다.
    """

    def __init__(self, variable: str, message: Optional[str] = None):
        full_message = f"설정 오류 [{variable}]: {message or '환경변수를 찾을 수 없습니다'}"
        super().__init__(full_message)
        self.variable = variable
        self.details["variable"] = variable


# =============================================================================
# 원격 호출 관련 예외
# =============================================================================


class RemoteQueryError(CollectorError):
    """AWS API 호출 실패 예외

    boto3/botocore 예외를 래핑하며, 조회 대상(ELB 이름 목록 또는 인스턴스 ID)을
    메시지에 포함합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        target: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation} 실패 [{target}]"
        if error_code:
            message = f"{message} ({error_code})"
        if error_message and cause is None:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.target = target
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "target": target,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        target: str,
        client_error: Exception,
    ) -> "RemoteQueryError":
        """botocore 예외로부터 생성

        ClientError면 응답의 Error.Code/Message를 추출하고,
        그 외(BotoCoreError 등 전송 계층 오류)는 원인으로만 보관합니다.

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            target: 조회 대상 식별자
            client_error: 원인 예외

        Returns:
            RemoteQueryError 인스턴스
        """
        error_code = None
        error_message = None

        # ClientError 형식 파싱
        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            target=target,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )
