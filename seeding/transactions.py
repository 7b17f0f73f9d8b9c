from bson import ObjectId
from seeding.payload import SEED_PAYLOAD

TRANSACTIONS = SEED_PAYLOAD["collection"]


class TransactionNotFound(LookupError):
    pass


def _object_id(transaction_id: str):
    # Malformed ids can't match anything, treat them like unknown ones
    if not ObjectId.is_valid(transaction_id):
        return None
    return ObjectId(transaction_id)


def _to_dict(doc) -> dict:
    return {
        "id": str(doc["_id"]),
        "amount": doc.get("amount"),
        "date": doc.get("date"),
        "type": doc.get("type"),
    }


def create_transaction(db, amount: float, date: str, tx_type: str) -> dict:
    doc = {"amount": float(amount), "date": date, "type": tx_type}
    res = db[TRANSACTIONS].insert_one(doc)
    doc["_id"] = res.inserted_id
    print(f"✅ Transaction created: {res.inserted_id}")
    return _to_dict(doc)


def get_transaction(db, transaction_id: str) -> dict:
    oid = _object_id(transaction_id)
    doc = db[TRANSACTIONS].find_one({"_id": oid}) if oid else None
    if doc is None:
        raise TransactionNotFound(f"Transaction {transaction_id} not found")
    return _to_dict(doc)


def list_transactions(db) -> list:
    return [_to_dict(d) for d in db[TRANSACTIONS].find({})]


def update_transaction(db, transaction_id: str, amount: float, date: str, tx_type: str):
    """
    Overwrite amount, date and type of an existing transaction.
    A missing id is reported and returns None instead of raising.
    """
    oid = _object_id(transaction_id)
    fields = {"amount": float(amount), "date": date, "type": tx_type}
    res = db[TRANSACTIONS].update_one({"_id": oid}, {"$set": fields}) if oid else None
    if res is None or res.matched_count == 0:
        print(f"Transaction with ID {transaction_id} not found for update")
        return None
    print(f"✅ Transaction updated: {transaction_id}")
    return {"id": transaction_id, **fields}


def delete_transaction(db, transaction_id: str) -> bool:
    oid = _object_id(transaction_id)
    deleted = db[TRANSACTIONS].delete_one({"_id": oid}).deleted_count if oid else 0
    print(f"✅ Transaction deleted with ID: {transaction_id}")
    return deleted == 1
