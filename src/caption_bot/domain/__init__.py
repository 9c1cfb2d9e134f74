# 🏭 caption_bot/domain/__init__.py
"""🏭 Доменний шар: компонування підпису, політика доступу, контракти диспетчера."""
