import functools
import inspect
from typing import Any, Callable, TypeVar

from core.bind.repository import Repository

F = TypeVar("F", bound=Callable[..., Any])


def transactional(func: F) -> F:
    """
    서비스 메서드 단위 트랜잭션 데코레이터

    서비스 인스턴스가 가진 Repository 속성을 모두 찾아
    성공 시 commit, 예외 시 rollback 후 재전파, 마지막에 close 한다.
    """

    @functools.wraps(func)
    async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        repositories = [
            attr for attr in vars(self).values() if isinstance(attr, Repository)
        ]

        try:
            if inspect.iscoroutinefunction(func):
                result = await func(self, *args, **kwargs)
            else:
                result = func(self, *args, **kwargs)

            for repository in repositories:
                await repository.commit()

            return result
        except Exception:
            for repository in repositories:
                await repository.rollback()
            raise
        finally:
            for repository in repositories:
                await repository.close()

    return wrapper  # type: ignore[return-value]
