import os
import tempfile
from typing import Any, Optional

from core.config import get_setting
from core.log.logging import get_logging
from cupid.session.domain.session_state import SessionState
from cupid.session.domain.transitions import apply_event

settings = get_setting()
logger = get_logging()


class SessionStore:
    """
    세션 상태 JSON 파일 저장소 (DATA_PATH + SESSION_PATH/<key>.json)

    잠금 없이 마지막 쓰기가 이긴다. 쓰기는 임시 파일 후 교체라 반쯤 쓴 파일은 남지 않는다.
    """

    def __init__(self, base_dir: Optional[str] = None):
        self.base_dir = base_dir or settings.DATA_PATH + settings.SESSION_PATH
        os.makedirs(self.base_dir, exist_ok=True)

    def _path(self, key: str) -> str:
        return os.path.join(self.base_dir, f"{key}.json")

    def load(self, key: str) -> Optional[SessionState]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        with open(path, "rt", encoding="utf-8") as f:
            return SessionState.model_validate_json(f.read())

    def save(self, state: SessionState) -> None:
        fd, tmp_path = tempfile.mkstemp(dir=self.base_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "wt", encoding="utf-8") as f:
                f.write(state.model_dump_json())
            os.replace(tmp_path, self._path(state.key))
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def delete(self, key: str) -> None:
        path = self._path(key)
        if os.path.exists(path):
            os.remove(path)

    def dispatch(self, state: SessionState, event: Any) -> SessionState:
        """상태 전이 + 저장. 세션 상태는 이 메서드를 통해서만 바뀐다."""
        new_state = apply_event(state, event)
        self.save(new_state)
        logger.debug(
            f"session {state.key}: {type(event).__name__} -> {new_state.mode.value}"
        )
        return new_state


# FastAPI Depends 용 DI 팩토리
def get_session_store() -> SessionStore:
    return SessionStore()
