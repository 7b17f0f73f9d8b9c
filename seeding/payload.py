# Everything the seeder writes. The record lands in "students", not in the
# collection it creates; keep it that way until the owner decides otherwise.
SEED_PAYLOAD = {
    "database": "transaction_db",
    "collection": "transactions",
    "insert_collection": "students",
    "record": {
        "amount": "1000",
        "date": "2025-01-01",
        "type": "SELL",
    },
}


def seed_message(payload: dict) -> str:
    return f'Database "{payload["database"]}" and collection "{payload["collection"]}" have been initialized.'
