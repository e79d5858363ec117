import sys
from pathlib import Path

import pytest

# repo root на sys.path, чтобы `import mazelink` работал без установки
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))


class CountingSeeds:
    """Предсказуемый источник сидов: 1000, 1001, ..."""

    def __init__(self, start: int = 1000) -> None:
        self.next = start
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        value = self.next
        self.next += 1
        return value


@pytest.fixture
def seeds():
    return CountingSeeds()
