"""
utils/texts.py
--------------
Every user-visible string of the bot, in one place and one locale (Russian).
"""

# ── Keyboard labels ───────────────────────────────────────
BTN_SAVE = "Save 🔖"
BTN_LIST = "List 📋"
BTN_DELETE = "Delete ❌"
BTN_GET = "Get 🔍"
BTN_PREV = "⬅️ Предыдущая"
BTN_NEXT = "Следующая ➡️"

# ── /start and /help ──────────────────────────────────────
GREETING = "Добро пожаловать!"

MENU_TEXT = """Доступные команды:

Save 🔖 - сохраняет ссылку
List 📋 - возвращает список ваших ссылок
Delete ❌ - удаляет ссылку
Get 🔍 - возвращает ссылку по её id

Выберите команду из списка ниже:"""

# ── Prompts ───────────────────────────────────────────────
PROMPT_SAVE = "Пожалуйста, отправьте название и ссылку в формате: название ссылка."
PROMPT_DELETE = "Пожалуйста, отправьте ID ссылки, которую вы хотите удалить."
PROMPT_GET = "Пожалуйста, отправьте ID ссылки, которую вы хотите получить."

UNKNOWN_COMMAND = "Неизвестная команда"

# ── Save ──────────────────────────────────────────────────
SAVE_OK = "Ссылка сохранена! Уникальный код: {id}"
SAVE_DUPLICATE = "Эта ссылка уже сохранена."
SAVE_FAILED = "Произошла ошибка при сохранении ссылки."
INVALID_URL = "Неверный формат URL."

# ── List ──────────────────────────────────────────────────
LIST_EMPTY = "У вас пока нет сохранённых ссылок."
LIST_HEADER = "Ваши сохранённые ссылки (страница {page}):\n"
LIST_ITEM = "ID: {id}\nНазвание: {name}\nURL: {url}\nСоздано: {created_at}\n\n"
LIST_FAILED = "Произошла ошибка при получении списка ссылок."

# ── Delete / Get ──────────────────────────────────────────
NOT_FOUND = "Ссылка с таким ID не найдена."
DELETE_FORBIDDEN = "Вы не можете удалить эту ссылку."
DELETE_OK = "Ссылка успешно удалена."
DELETE_FAILED = "Произошла ошибка при удалении ссылки."
GET_OK = "URL: {url}"
GET_FAILED = "Произошла ошибка при получении ссылки."
