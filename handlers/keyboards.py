"""
handlers/keyboards.py
---------------------
Telegram keyboard markup for each Keyboard kind.
"""

from typing import Optional

from telegram import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    ReplyKeyboardMarkup,
)

from models.events import Action, Button, Keyboard
from utils import texts

# Reply keyboard label -> menu action
LABEL_ACTIONS = {
    texts.BTN_SAVE: Action.SAVE,
    texts.BTN_LIST: Action.LIST,
    texts.BTN_DELETE: Action.DELETE,
    texts.BTN_GET: Action.GET,
}

MAIN_KEYBOARD = ReplyKeyboardMarkup(
    [
        [texts.BTN_SAVE, texts.BTN_LIST],
        [texts.BTN_DELETE, texts.BTN_GET],
    ],
    resize_keyboard=True,
    one_time_keyboard=False,
)

MENU_KEYBOARD = InlineKeyboardMarkup(
    [
        [
            InlineKeyboardButton(texts.BTN_SAVE, callback_data=Button.SAVE.value),
            InlineKeyboardButton(texts.BTN_LIST, callback_data=Button.LIST.value),
        ],
        [
            InlineKeyboardButton(texts.BTN_DELETE, callback_data=Button.DELETE.value),
            InlineKeyboardButton(texts.BTN_GET, callback_data=Button.GET.value),
        ],
    ]
)

PAGING_KEYBOARD = InlineKeyboardMarkup(
    [
        [
            InlineKeyboardButton(texts.BTN_PREV, callback_data=Button.PREV.value),
            InlineKeyboardButton(texts.BTN_NEXT, callback_data=Button.NEXT.value),
        ],
    ]
)

_MARKUPS = {
    Keyboard.MAIN: MAIN_KEYBOARD,
    Keyboard.MENU: MENU_KEYBOARD,
    Keyboard.PAGING: PAGING_KEYBOARD,
}


def markup_for(keyboard: Optional[Keyboard]):
    """Telegram reply_markup for a Keyboard kind (None stays None)."""
    if keyboard is None:
        return None
    return _MARKUPS[keyboard]
