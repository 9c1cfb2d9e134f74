# 🛂 caption_bot/domain/access/policy.py
"""
🛂 Політика доступу та груповий «активаційний» шлюз.

🔹 `AccessPolicy` — два незмінні набори chat id; чорний список має пріоритет.
🔹 `GroupGate` — у групах обробляємо лише за точною фразою або з імовірністю.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import random
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

# 🧩 Внутрішні модулі проєкту
from caption_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.access")


def _as_id_set(ids: Optional[Iterable[int]]) -> Optional[FrozenSet[int]]:
    if ids is None:
        return None
    return frozenset(int(chat_id) for chat_id in ids)


# ================================
# 🛂 СПИСКИ ДОСТУПУ
# ================================
@dataclass(frozen=True, slots=True)
class AccessPolicy:
    """
    Білий/чорний списки чатів.

    Відсутній список (None) не обмежує нічого; присутній порожній білий
    список не пропускає нікого.
    """

    whitelist: Optional[FrozenSet[int]] = None
    blacklist: Optional[FrozenSet[int]] = None

    @classmethod
    def from_lists(
        cls,
        whitelist: Optional[Iterable[int]] = None,
        blacklist: Optional[Iterable[int]] = None,
    ) -> "AccessPolicy":
        return cls(whitelist=_as_id_set(whitelist), blacklist=_as_id_set(blacklist))

    def is_allowed(self, chat_id: int) -> bool:
        if self.blacklist is not None and chat_id in self.blacklist:
            return False
        if self.whitelist is not None:
            return chat_id in self.whitelist
        return True


# ================================
# 👥 ГРУПОВИЙ ШЛЮЗ
# ================================
@dataclass(frozen=True)
class GroupGate:
    """👥 Вирішує, чи обробляти фото з групового чату."""

    enabled: bool = False
    activation_phrase: str = ""
    activation_probability: float = 0.0
    rng: random.Random = field(default_factory=random.Random)

    def allows(self, caption: Optional[str]) -> bool:
        """
        Пропускає подію, якщо групи увімкнено і (фрази немає, або підпис
        дорівнює фразі, або спрацювала випадкова спроба).
        """
        if not self.enabled:
            return False
        if not self.activation_phrase:
            return True
        if caption == self.activation_phrase:
            logger.debug("🔑 Активаційна фраза збіглася")
            return True
        return self.rng.random() < self.activation_probability


__all__ = ["AccessPolicy", "GroupGate"]
