from flashstudy.db.database import get_session, init_db
from flashstudy.db.operations import (
    card_to_model,
    count_cards,
    delete_all_cards,
    delete_card,
    get_card,
    insert_card,
    list_all_cards,
    list_cards,
    reset_card_rating,
    update_card_content,
    update_card_rating,
)

__all__ = [
    "card_to_model",
    "count_cards",
    "delete_all_cards",
    "delete_card",
    "get_card",
    "get_session",
    "init_db",
    "insert_card",
    "list_all_cards",
    "list_cards",
    "reset_card_rating",
    "update_card_content",
    "update_card_rating",
]
