"""
core/parallel/executor.py - Fan-out 실행기

항목별로 하나의 작업을 동시에 실행하고 전체 완료를 기다립니다 (wait-for-all).
ThreadPoolExecutor 기반이며, 첫 번째 실패에서 즉시 중단합니다.

주요 구성 요소:
- ParallelConfig: 병렬 실행 설정 (워커 수)
- FanOutExecutor: 항목 목록에 대한 fan-out 실행기
- fan_out: 간편한 fan-out 래퍼 함수

특징:
- 워커 수 기본값은 항목 수와 같음 (상한 없음)
- 결과는 완료 순서대로 수집 (입력 순서 보장 안 함)
- 첫 실패 시 아직 시작하지 않은 작업은 취소하고 해당 예외를 그대로 전파
- 재시도 없음

Example:
    from core.parallel import fan_out

    def describe(instance_id):
        return ec2.describe_instances(InstanceIds=[instance_id])

    details = fan_out(describe, ["i-1", "i-2"], service="ec2")
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
I = TypeVar("I")  # noqa: E741


@dataclass
class ParallelConfig:
    """병렬 실행 설정

    Attributes:
        max_workers: 최대 동시 스레드 수 (None이면 항목 수만큼)
    """

    max_workers: int | None = None

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    def workers_for(self, task_count: int) -> int:
        """작업 수에 맞는 실제 워커 수"""
        if self.max_workers is None:
            return task_count
        return min(self.max_workers, task_count)


class FanOutExecutor:
    """Fan-out 실행기

    모든 항목에 같은 함수를 동시에 적용하고, 전부 성공하면 결과 리스트를,
    하나라도 실패하면 첫 번째 예외를 발생시킵니다.

    Example:
        executor = FanOutExecutor(ParallelConfig(max_workers=None))
        details = executor.execute(fetch_instance, instance_ids, service="ec2")
    """

    def __init__(self, config: ParallelConfig | None = None):
        """초기화

        Args:
            config: 병렬 실행 설정 (None이면 기본값)
        """
        self.config = config or ParallelConfig()

    def execute(
        self,
        func: Callable[[I], T],
        items: Sequence[I],
        service: str = "default",
    ) -> list[T]:
        """작업 함수를 모든 항목에 병렬 실행

        Args:
            func: item -> T 함수
            items: 작업 대상 목록
            service: AWS 서비스 이름 (로깅용)

        Returns:
            완료 순서대로 수집한 결과 리스트

        Raises:
            Exception: 가장 먼저 완료된 실패 작업의 예외
        """
        if not items:
            return []

        workers = self.config.workers_for(len(items))
        logger.debug(f"fan-out 시작: {len(items)}개 작업, max_workers={workers}, service={service}")

        results: list[T] = []
        start_time = time.monotonic()

        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix=f"fanout-{service}")
        try:
            futures: dict[Future[T], I] = {executor.submit(func, item): item for item in items}

            for future in as_completed(futures):
                error = future.exception()
                if error is not None:
                    logger.debug(f"fan-out 작업 실패 [{futures[future]}]: {error}")
                    raise error
                results.append(future.result())
        except BaseException:
            # 시작 전 작업은 취소, 진행 중인 호출은 기다리지 않음
            executor.shutdown(wait=False, cancel_futures=True)
            raise

        executor.shutdown(wait=True)

        total_time = (time.monotonic() - start_time) * 1000
        logger.debug(f"fan-out 완료: {len(results)}개, 총 {total_time:.0f}ms")

        return results


def fan_out(
    func: Callable[[I], T],
    items: Sequence[I],
    max_workers: int | None = None,
    service: str = "default",
) -> list[T]:
    """fan-out 편의 함수

    FanOutExecutor를 간단하게 사용할 수 있는 래퍼입니다.

    Args:
        func: item -> T
        items: 작업 대상 목록
        max_workers: 최대 동시 스레드 수 (None이면 항목 수만큼)
        service: AWS 서비스 이름 (로깅용)

    Returns:
        완료 순서대로 수집한 결과 리스트
    """
    return FanOutExecutor(ParallelConfig(max_workers=max_workers)).execute(func, items, service=service)
